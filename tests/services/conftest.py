"""Service test fixtures — facade over an in-memory store seeded like the demo data."""

from decimal import Decimal

import pytest

from cashcard.core.card import Card
from cashcard.infrastructure.memory_store import InMemoryCardStore
from cashcard.services.card_operations import CardOperations


@pytest.fixture
def store():
    return InMemoryCardStore([
        Card(id=99, amount=Decimal("123.45"), owner="sarah1"),
        Card(id=100, amount=Decimal("100.00"), owner="sarah1"),
        Card(id=101, amount=Decimal("150.00"), owner="sarah1"),
        Card(id=102, amount=Decimal("200.00"), owner="kumar2"),
    ])


@pytest.fixture
def ops(store):
    return CardOperations(store, default_page_size=20, max_page_size=100)
