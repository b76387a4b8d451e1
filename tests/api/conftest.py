"""API test fixtures — FastAPI test client over a seeded in-memory database.

Invariants:
    - get_db overridden to use the per-test engine
    - db_manager patched for the readiness probe, restored afterwards
    - User directory built with cheap argon2 parameters

Design Decisions:
    - httpx AsyncClient over ASGITransport: no lifespan run, so wiring is done here
"""

import pytest
from argon2 import PasswordHasher
from httpx import ASGITransport, AsyncClient

import cashcard.infrastructure.database as db_module
from cashcard.config import get_settings
from cashcard.infrastructure.database import DatabaseSessionManager, get_db
from cashcard.infrastructure.security import UserDirectory, get_user_directory
from cashcard.main import app


@pytest.fixture
async def client(test_engine, test_session_factory, seed_cards):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    directory = UserDirectory(
        get_settings().users,
        hasher=PasswordHasher(time_cost=1, memory_cost=8, parallelism=1),
    )
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_user_directory] = lambda: directory

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
