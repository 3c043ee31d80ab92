"""Composição determinística da notificação de ban (embed do Discord)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from app.protocols.models import EmbedField, NotificationMessage

if TYPE_CHECKING:
    from app.domain.moderation_log import BanRecord

BAN_EMBED_COLOR = 0x9B59B6  # magenta escuro
NO_REASON = "No reason provided"

_PERMANENT_TITLE = "🐰 {user} has been permanently banned!"
_TEMPORARY_TITLE = "🐰 {user} has been banned."


def compose_ban_notification(record: BanRecord, gif_url: str) -> NotificationMessage:
    """Monta a mensagem de um ban recém-aplicado.

    Campos, nesta ordem: Reason (largura total), Issuing Mod, Duration
    e Subreddit (inline).

    Args:
        record: Ban já persistido
        gif_url: Thumbnail (GIF do lookup ou default)

    Returns:
        NotificationMessage pronta para o dispatcher
    """
    if record.is_permanent:
        title = _PERMANENT_TITLE.format(user=record.user)
        duration_text = "Permanent"
    else:
        title = _TEMPORARY_TITLE.format(user=record.user)
        duration_text = f"{record.duration} days"

    return NotificationMessage(
        title=title,
        color=BAN_EMBED_COLOR,
        fields=(
            EmbedField("Reason", record.reason or NO_REASON, inline=False),
            EmbedField("Issuing Mod", record.moderator, inline=True),
            EmbedField("Duration", duration_text, inline=True),
            EmbedField("Subreddit", f"r/{record.subreddit}", inline=True),
        ),
        thumbnail_url=gif_url,
        timestamp=format_timestamp(record.timestamp),
    )


def format_timestamp(epoch_ms: int) -> str:
    """ISO-8601 UTC com milissegundos e sufixo Z (ex.: 2024-01-01T00:00:00.000Z)."""
    moment = datetime.fromtimestamp(epoch_ms // 1000, tz=UTC) + timedelta(
        milliseconds=epoch_ms % 1000
    )
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
