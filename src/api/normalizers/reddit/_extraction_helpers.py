"""Helpers de extração de campos dos formatos crus do Reddit.

Dois formatos chegam ao serviço:
- Trigger de ModAction: blocos aninhados (`targetUser.name`, `moderator.name`,
  `subreddit.name`)
- Entrada do mod log: campos planos (`target_author`, `mod`, `created_utc`)
  ou aninhados (`target.author`, `moderator.username`, `createdAt`)

Blocos de nome podem ser objeto ou string pura.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

_NAME_KEYS = ("name", "username", "author")
_DAYS_PATTERN = re.compile(r"^\s*(\d+)\s*(?:days?)?\s*$", re.IGNORECASE)


def name_from(value: Any) -> str | None:
    """Extrai um nome de usuário/subreddit de string ou objeto."""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        for key in _NAME_KEYS:
            candidate = value.get(key)
            if isinstance(candidate, str) and candidate.strip():
                return candidate.strip()
    return None


def first_name(data: dict[str, Any], *keys: str) -> str | None:
    """Primeiro nome não vazio entre as chaves informadas."""
    for key in keys:
        name = name_from(data.get(key))
        if name:
            return name
    return None


def text_field(data: dict[str, Any], key: str) -> str | None:
    """Campo textual opcional; vazio vira None."""
    value = data.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_duration(raw: str | None) -> str:
    """Reduz a duração a "permanent" ou contagem de dias.

    "7", "7 days" e "1 day" viram "7"/"1"; ausente vira "permanent".
    Texto não reconhecido é mantido como veio.
    """
    if not raw:
        return "permanent"
    if raw.strip().lower() == "permanent":
        return "permanent"
    match = _DAYS_PATTERN.match(raw)
    if match:
        return match.group(1)
    return raw.strip()


def entry_timestamp_ms(entry: dict[str, Any]) -> int | None:
    """Timestamp histórico de uma entrada do mod log em epoch ms.

    Aceita `created_utc` (segundos, formato da API) ou `createdAt`
    (epoch ms ou ISO-8601).
    """
    created_utc = entry.get("created_utc")
    if isinstance(created_utc, (int, float)) and not isinstance(created_utc, bool):
        return int(created_utc * 1000)

    created_at = entry.get("createdAt")
    if isinstance(created_at, (int, float)) and not isinstance(created_at, bool):
        return int(created_at)
    if isinstance(created_at, str) and created_at:
        try:
            parsed = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        except ValueError:
            return None
        return int(parsed.timestamp() * 1000)
    return None
