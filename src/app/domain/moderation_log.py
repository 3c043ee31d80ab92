"""Registros canônicos do log de moderação.

Três variantes saem da normalização de eventos:
- BanRecord: um ban aplicado a um usuário
- ModActionRecord: qualquer outra ação de moderação
- Skip: evento reconhecido mas descartado (unban, ban do AutoModerator)

Os registros são imutáveis. Persistência: hashes Redis com os nomes de
campo legados (banId, mod, targetUser...), todos como string.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

BAN_ACTION = "banuser"
UNBAN_ACTION = "unbanuser"
AUTOMODERATOR = "AutoModerator"

PERMANENT_DURATION = "permanent"
UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class BanRecord:
    """Ban de um usuário em um subreddit.

    Attributes:
        ban_id: ID único (do Reddit ou sintético `ban-{ms}`)
        user: Usuário banido
        moderator: Moderador que aplicou o ban
        reason: Motivo (pode ser vazio)
        duration: "permanent" ou número de dias em texto
        subreddit: Subreddit onde o ban ocorreu
        timestamp: Epoch em milissegundos
    """

    ban_id: str
    user: str
    moderator: str
    reason: str
    duration: str
    subreddit: str
    timestamp: int

    @property
    def is_permanent(self) -> bool:
        """Duração vazia ou literal "permanent"."""
        return not self.duration or self.duration == PERMANENT_DURATION

    def with_details(self, *, reason: str, duration: str) -> BanRecord:
        """Retorna cópia com motivo/duração substituídos."""
        return replace(self, reason=reason, duration=duration or PERMANENT_DURATION)

    def to_hash(self) -> dict[str, str]:
        """Converte para o mapping gravado no Redis."""
        return {
            "banId": self.ban_id,
            "user": self.user,
            "mod": self.moderator,
            "reason": self.reason,
            "duration": self.duration,
            "subreddit": self.subreddit,
            "timestamp": str(self.timestamp),
        }

    @classmethod
    def from_hash(cls, data: dict[str, Any]) -> BanRecord:
        """Cria a partir do mapping lido do Redis."""
        return cls(
            ban_id=data["banId"],
            user=data.get("user", UNKNOWN),
            moderator=data.get("mod", UNKNOWN),
            reason=data.get("reason", ""),
            duration=data.get("duration", PERMANENT_DURATION),
            subreddit=data.get("subreddit", UNKNOWN),
            timestamp=int(data.get("timestamp", 0)),
        )


@dataclass(frozen=True, slots=True)
class ModActionRecord:
    """Ação de moderação que não é ban nem unban."""

    log_id: str
    action: str
    target_user: str
    moderator: str
    details: str
    subreddit: str
    timestamp: int

    def to_hash(self) -> dict[str, str]:
        """Converte para o mapping gravado no Redis."""
        return {
            "logId": self.log_id,
            "action": self.action,
            "targetUser": self.target_user,
            "mod": self.moderator,
            "details": self.details,
            "subreddit": self.subreddit,
            "timestamp": str(self.timestamp),
        }

    @classmethod
    def from_hash(cls, data: dict[str, Any]) -> ModActionRecord:
        """Cria a partir do mapping lido do Redis."""
        return cls(
            log_id=data["logId"],
            action=data.get("action", UNKNOWN),
            target_user=data.get("targetUser", UNKNOWN),
            moderator=data.get("mod", UNKNOWN),
            details=data.get("details", ""),
            subreddit=data.get("subreddit", UNKNOWN),
            timestamp=int(data.get("timestamp", 0)),
        )


@dataclass(frozen=True, slots=True)
class Skip:
    """Evento descartado na normalização; nada é gravado nem notificado."""

    reason: str


NormalizedEvent = BanRecord | ModActionRecord | Skip


@dataclass(frozen=True, slots=True)
class BackfillMarkers:
    """Marcadores gravados ao fim do backfill de instalação."""

    initialized_at: int | None
    backfill_count: int | None

    @property
    def is_complete(self) -> bool:
        return self.initialized_at is not None and self.backfill_count is not None
