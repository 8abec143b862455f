"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook de pedidos, health)
- Validação inicial de request (headers, query params)
- Delegação para connectors/use_cases
- Tradução de erros em status HTTP
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
