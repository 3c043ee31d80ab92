"""Normalizer Reddit — eventos de moderação → BanRecord | ModActionRecord | Skip."""

from .normalizer import (
    AUTOMODERATOR,
    BAN_ACTION,
    UNBAN_ACTION,
    RedditEventNormalizer,
    apply_enrichment,
    create_reddit_normalizer,
    matches_target,
    needs_enrichment,
    normalize_mod_log_entry,
    normalize_trigger_event,
    subreddit_of,
)

__all__ = [
    "AUTOMODERATOR",
    "BAN_ACTION",
    "UNBAN_ACTION",
    "RedditEventNormalizer",
    "apply_enrichment",
    "create_reddit_normalizer",
    "matches_target",
    "needs_enrichment",
    "normalize_mod_log_entry",
    "normalize_trigger_event",
    "subreddit_of",
]
