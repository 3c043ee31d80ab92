"""Connector Reddit — leitura paginada do mod log."""

from .mod_log_client import RedditModLogClient, create_reddit_mod_log_client

__all__ = [
    "RedditModLogClient",
    "create_reddit_mod_log_client",
]
