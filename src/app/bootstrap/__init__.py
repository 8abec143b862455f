"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos use cases.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app(get_base_settings())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging

if TYPE_CHECKING:
    from config.settings import BaseSettings, ShopifySettings, WhatsAppSettings

logger = logging.getLogger(__name__)


def initialize_app(base: BaseSettings) -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(
    base: BaseSettings,
    whatsapp: WhatsAppSettings,
    shopify: ShopifySettings,
) -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Returns:
        Lista de erros encontrados (vazia = OK)

    Raises:
        RuntimeError: Se houver erros em ambiente estrito
    """
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"whatsapp: {error}" for error in whatsapp.validate())
    errors.extend(f"shopify: {error}" for error in shopify.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
