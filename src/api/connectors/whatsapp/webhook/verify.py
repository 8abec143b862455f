"""Verificação de webhook exigida pela Meta (handshake de assinatura)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

HUB_MODE_SUBSCRIBE = "subscribe"
HUB_QUERY_PARAMS = ("hub.mode", "hub.verify_token", "hub.challenge")


class WebhookChallengeError(ValueError):
    """Erro de verificação do desafio do webhook (responder 403)."""


def verify_webhook_challenge(
    hub_mode: str | None,
    hub_verify_token: str | None,
    hub_challenge: str | None,
    expected_token: str | None,
) -> str:
    """Valida challenge de webhook e retorna o conteúdo a ser respondido.

    Comparação simples de strings: o handshake é único e de baixo valor,
    não uma credencial por requisição.

    Args:
        hub_mode: Valor de hub.mode
        hub_verify_token: Valor de hub.verify_token
        hub_challenge: Valor de hub.challenge
        expected_token: Token configurado no servidor

    Raises:
        WebhookChallengeError: Se token estiver ausente ou inválido

    Returns:
        Challenge recebido, sem alteração
    """
    if not expected_token:
        raise WebhookChallengeError("missing_verify_token")

    if hub_mode != HUB_MODE_SUBSCRIBE or hub_verify_token != expected_token:
        raise WebhookChallengeError("verification_failed")

    return hub_challenge or ""


def is_challenge_request(query_params: Mapping[str, str]) -> bool:
    """True se algum parâmetro hub.* estiver presente na query."""
    return any(param in query_params for param in HUB_QUERY_PARAMS)
