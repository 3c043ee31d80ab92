"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto.
Implementações concretas de IO ficam em app/infra/ e api/connectors/.
"""

from app.services.ban_notification import compose_ban_notification

__all__ = [
    "compose_ban_notification",
]
