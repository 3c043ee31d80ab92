"""Use cases Reddit — triggers de instalação e de ação de moderação."""

from app.use_cases.reddit.backfill_ban_history import (
    BackfillBanHistoryUseCase,
    BackfillResult,
    BackfillState,
)
from app.use_cases.reddit.process_mod_action import (
    ModActionOutcome,
    ProcessModActionUseCase,
)

__all__ = [
    "BackfillBanHistoryUseCase",
    "BackfillResult",
    "BackfillState",
    "ModActionOutcome",
    "ProcessModActionUseCase",
]
