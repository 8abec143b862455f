"""Exceções de domínio para falhas de chamadas outbound."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas em plataformas externas (WhatsApp, Shopify)."""


class NotifyFailure(InfrastructureError):
    """Falha ao enviar notificação de pedido para o WhatsApp."""


class MutationDispatchFailure(InfrastructureError):
    """Falha ao despachar mutation para a Admin API do Shopify."""
