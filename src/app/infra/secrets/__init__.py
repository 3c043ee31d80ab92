"""Secrets — configuração sensível por instalação.

Módulos disponíveis:
    - env_installation_settings: webhook, API key e flag por subreddit via ambiente
"""

from __future__ import annotations

from app.infra.secrets.env_installation_settings import EnvInstallationSettings

__all__ = [
    "EnvInstallationSettings",
]
