from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

from fastapi import Request

from ranchcalc.application.errors import ValidationError
from ranchcalc.config.settings import Settings
from ranchcalc.infrastructure.db.session import SQLAlchemyUnitOfWork


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not configured")
    return settings


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_farm_id(request: Request) -> UUID:
    settings = get_app_settings(request)
    raw = request.headers.get(settings.farm_header)
    if not raw:
        raise ValidationError(f"Missing {settings.farm_header} header")
    try:
        return UUID(raw)
    except ValueError as exc:
        raise ValidationError(f"Invalid {settings.farm_header} header") from exc
