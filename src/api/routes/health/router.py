"""Endpoints de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()

SERVICE_NAME = "order-relay"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: settings válidas e componentes montados."""
    state = request.app.state
    errors: list[str] = list(getattr(state, "settings_errors", []))
    relay = getattr(state, "relay", None)

    checks = {
        "order_notifier": "ok" if getattr(relay, "notifier", None) else "failed",
        "action_router": "ok" if getattr(relay, "action_router", None) else "failed",
    }
    ready = not errors and all(value == "ok" for value in checks.values())

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": checks,
        "settings_error_count": len(errors),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
