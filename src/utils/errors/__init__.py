"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    ModLogUnavailableError,
    RedisConnectionError,
)

__all__ = [
    "InfrastructureError",
    "ModLogUnavailableError",
    "RedisConnectionError",
]
