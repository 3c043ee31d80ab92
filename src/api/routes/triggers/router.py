"""Endpoints dos triggers da plataforma.

Endpoints:
- POST /triggers/app-install: backfill de bans históricos
- POST /triggers/mod-action: evento de moderação em tempo real
- POST /triggers/app-upgrade: sem efeito (reservado para migrações)

Cada evento é processado inline, uma única vez. A resposta é sempre
200 quando o corpo é JSON válido; falhas de processamento aparecem só
nos logs do operador.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from fastapi import APIRouter, Request, Response, status
from pydantic import ValidationError

from api.normalizers.reddit import subreddit_of
from api.routes.triggers.models import InstallationEvent, TriggerResponse
from app.observability import (
    get_correlation_id,
    record_latency,
    record_trigger_outcome,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy-loaded (inicializados na primeira requisição)
_mod_action_use_case = None
_backfill_use_case = None
_installation_settings = None


class InvalidEventError(ValueError):
    """Corpo do trigger não é um objeto JSON."""


def _get_mod_action_use_case():
    """Obtém o use case de ModAction (lazy-loading)."""
    global _mod_action_use_case
    if _mod_action_use_case is None:
        from app.bootstrap.dependencies import create_process_mod_action

        _mod_action_use_case = create_process_mod_action()
    return _mod_action_use_case


def _get_backfill_use_case():
    """Obtém o use case de backfill (lazy-loading)."""
    global _backfill_use_case
    if _backfill_use_case is None:
        from app.bootstrap.dependencies import create_backfill_ban_history

        _backfill_use_case = create_backfill_ban_history()
    return _backfill_use_case


def _get_installation_settings():
    """Obtém o provider de configuração por instalação (lazy-loading)."""
    global _installation_settings
    if _installation_settings is None:
        from app.bootstrap.dependencies import create_installation_settings

        _installation_settings = create_installation_settings()
    return _installation_settings


async def _read_event(request: Request) -> dict[str, Any]:
    raw_body = await request.body()
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidEventError("JSON inválido") from exc
    if not isinstance(payload, dict):
        raise InvalidEventError("Evento deve ser um objeto JSON")
    return payload


def _bad_request(trigger: str, exc: Exception) -> Response:
    logger.warning(
        "trigger_payload_invalid",
        extra={"trigger": trigger, "error": str(exc)},
    )
    return Response(
        content="Bad Request",
        media_type="text/plain",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.post("/app-install", response_model=None)
async def app_install(request: Request) -> Response | TriggerResponse:
    """Instalação em um subreddit: importa bans históricos sem notificar."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    started_at = time.perf_counter()
    try:
        try:
            event = InstallationEvent.model_validate(await _read_event(request))
        except (InvalidEventError, ValidationError) as exc:
            return _bad_request("app_install", exc)

        subreddit = event.subreddit_name
        logger.info("app_installed", extra={"subreddit": subreddit})

        try:
            result = await _get_backfill_use_case().execute(subreddit)
        except Exception:
            logger.exception("backfill_failed", extra={"subreddit": subreddit})
            record_trigger_outcome("app_install", "failed", stored=False)
            return TriggerResponse(status="failed", correlation_id=get_correlation_id())

        record_trigger_outcome("app_install", result.state.value, stored=result.imported > 0)
        return TriggerResponse(
            status=result.state.value,
            correlation_id=get_correlation_id(),
            imported=result.imported,
            skipped=result.skipped,
        )
    finally:
        record_latency("triggers", "app_install", (time.perf_counter() - started_at) * 1000)
        reset_correlation_id(token)


@router.post("/mod-action", response_model=None)
async def mod_action(request: Request) -> Response | TriggerResponse:
    """Ação de moderação em tempo real."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    started_at = time.perf_counter()
    try:
        try:
            event = await _read_event(request)
        except InvalidEventError as exc:
            return _bad_request("mod_action", exc)

        try:
            config = await _get_installation_settings().get(subreddit_of(event) or "")
            outcome = await _get_mod_action_use_case().execute(event, config)
        except Exception:
            logger.exception("mod_action_failed", extra={"action": event.get("action")})
            record_trigger_outcome("mod_action", "failed", stored=False)
            return TriggerResponse(status="failed", correlation_id=get_correlation_id())

        record_trigger_outcome(
            "mod_action", outcome.kind, stored=outcome.stored, notified=outcome.notified
        )
        return TriggerResponse(
            status="failed" if outcome.error else outcome.kind,
            correlation_id=get_correlation_id(),
            record_id=outcome.record_id,
            stored=outcome.stored,
            notified=outcome.notified,
        )
    finally:
        record_latency("triggers", "mod_action", (time.perf_counter() - started_at) * 1000)
        reset_correlation_id(token)


@router.post("/app-upgrade", response_model=None)
async def app_upgrade(request: Request) -> Response | TriggerResponse:
    """Upgrade do app: apenas registrado."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        try:
            event = InstallationEvent.model_validate(await _read_event(request))
        except (InvalidEventError, ValidationError) as exc:
            return _bad_request("app_upgrade", exc)

        logger.info("app_upgraded", extra={"subreddit": event.subreddit_name})
        return TriggerResponse(status="ok", correlation_id=get_correlation_id())
    finally:
        reset_correlation_id(token)
