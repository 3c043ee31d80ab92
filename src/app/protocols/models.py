"""Modelos trocados entre use cases e connectors de notificação."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class EmbedField:
    """Campo de embed (nome, valor, se ocupa meia largura)."""

    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dataclass(frozen=True, slots=True)
class NotificationMessage:
    """Mensagem estruturada enviada ao chat (embed do Discord)."""

    title: str
    color: int
    fields: tuple[EmbedField, ...]
    thumbnail_url: str
    timestamp: str
    description: str | None = None

    def to_embed(self) -> dict[str, Any]:
        """Serializa no formato de embed da API de webhooks do Discord."""
        embed: dict[str, Any] = {
            "title": self.title,
            "color": self.color,
            "fields": [f.to_dict() for f in self.fields],
            "thumbnail": {"url": self.thumbnail_url},
            "timestamp": self.timestamp,
        }
        if self.description:
            embed["description"] = self.description
        return embed


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Resultado de uma entrega ao webhook."""

    success: bool
    status_code: int | None = None
    error: str | None = None
