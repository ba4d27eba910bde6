from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from ranchcalc.config.settings import Settings
from ranchcalc.infrastructure.db.base import Base
from ranchcalc.infrastructure.db.orm import animal, farm_config, lot, transaction  # noqa: F401
from ranchcalc.interfaces.http.main import create_app


@pytest.fixture()
def farm_id() -> UUID:
    return uuid4()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "farm_header": "X-Farm-ID",
            "log_level": "INFO",
            "default_global_daily_cost": "0",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()


@pytest.fixture()
def headers(farm_id: UUID) -> dict[str, str]:
    return {"X-Farm-ID": str(farm_id)}
