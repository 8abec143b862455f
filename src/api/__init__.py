"""API: camada de borda e adapters das plataformas externas.

Responsabilidades:
- Receber webhooks do Shopify e callbacks do WhatsApp
- Validar assinaturas e payloads
- Normalizar pedidos para OrderEvent
- Construir payloads para a Cloud API
- Clientes HTTP da Graph API (Meta) e Admin GraphQL API (Shopify)

Subpastas:
- connectors/: adapters HTTP por plataforma
- normalizers/: payloads externos → modelos internos
- payload_builders/: construção de payloads outbound
- routes/: endpoints HTTP (webhook de pedidos, health)
"""
