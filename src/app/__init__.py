"""App: orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: notificação de pedido e roteamento de ações
- domain/: OrderEvent e ActionPayload
- constants/: ActionKind
- protocols/: contratos e modelos de resultado
- infra/: cliente HTTP base
- observability/: correlation_id para logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
