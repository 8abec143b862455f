"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    MutationDispatchFailure,
    NotifyFailure,
)

__all__ = [
    "InfrastructureError",
    "MutationDispatchFailure",
    "NotifyFailure",
]
