"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Settings never point at a real database during tests
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from cashcard.db.base import Base  # noqa: E402
from cashcard.models.card import CashCard  # noqa: E402

SEED_CARDS = [
    (99, Decimal("123.45"), "sarah1"),
    (100, Decimal("100.00"), "sarah1"),
    (101, Decimal("150.00"), "sarah1"),
    (102, Decimal("200.00"), "kumar2"),
]


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_cards(test_db):
    """sarah1 owns 99/100/101, kumar2 owns 102."""
    for card_id, amount, owner in SEED_CARDS:
        test_db.add(CashCard(id=card_id, amount=amount, owner=owner))
    await test_db.commit()
    return SEED_CARDS
