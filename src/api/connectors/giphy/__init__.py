"""Connector Giphy — GIF aleatório usado como thumbnail."""

from .client import GiphyClient, create_giphy_client

__all__ = [
    "GiphyClient",
    "create_giphy_client",
]
