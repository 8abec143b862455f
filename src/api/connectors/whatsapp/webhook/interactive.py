"""Extração da resposta a botão em callbacks do WhatsApp.

Caminho principal: ``entry[0].changes[0].value.messages[0].interactive.button_reply.id``.
Botões quick-reply de template chegam como ``messages[0].button.payload``
e são aceitos como o mesmo valor.
"""

from __future__ import annotations

from typing import Any


def _first(items: Any) -> dict[str, Any] | None:
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def _first_message(payload: dict[str, Any]) -> dict[str, Any] | None:
    entry = _first(payload.get("entry"))
    if entry is None:
        return None
    change = _first(entry.get("changes"))
    if change is None:
        return None
    value = change.get("value")
    if not isinstance(value, dict):
        return None
    return _first(value.get("messages"))


def extract_button_reply_id(payload: dict[str, Any]) -> str | None:
    """Retorna o id do botão tocado ou None se o payload não é uma resposta."""
    message = _first_message(payload)
    if message is None:
        return None

    interactive = message.get("interactive")
    if isinstance(interactive, dict):
        button_reply = interactive.get("button_reply")
        if isinstance(button_reply, dict):
            button_id = button_reply.get("id")
            if isinstance(button_id, str) and button_id:
                return button_id

    button = message.get("button")
    if isinstance(button, dict):
        button_payload = button.get("payload")
        if isinstance(button_payload, str) and button_payload:
            return button_payload

    return None
