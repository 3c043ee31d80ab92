"""Modelos de request/response dos triggers da plataforma."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SubredditRef(BaseModel):
    """Referência ao subreddit da instalação."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None


class InstallationEvent(BaseModel):
    """Corpo dos triggers AppInstall e AppUpgrade."""

    model_config = ConfigDict(extra="allow")

    subreddit: SubredditRef | None = None

    @property
    def subreddit_name(self) -> str | None:
        return self.subreddit.name if self.subreddit and self.subreddit.name else None


class TriggerResponse(BaseModel):
    """Resposta de qualquer trigger; falhas ficam só nos logs."""

    status: str
    correlation_id: str
    record_id: str | None = None
    stored: bool | None = None
    notified: bool | None = None
    imported: int | None = None
    skipped: int | None = None
