"""SQL Card Store — SqlCardStore against an in-memory SQLite database.

Invariants:
    - Same contract as the in-memory store (owner scoping, id tie-break, windows)
    - SQLAlchemy failures surface as StorageFailureError
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from cashcard.core.card import Card
from cashcard.core.domain_types import SortDirection
from cashcard.core.errors import StorageFailureError
from cashcard.core.pagination import PageRequest
from cashcard.infrastructure.card_store import SqlCardStore


@pytest.fixture
def sql_store(test_db, seed_cards):
    return SqlCardStore(test_db)


async def test_create_assigns_fresh_id(sql_store):
    card = await sql_store.create(Decimal("250.00"), "sarah1")
    assert card.id > 102
    assert card.owner == "sarah1"
    assert card.amount == Decimal("250.00")


async def test_get_by_id_and_owner_requires_both(sql_store):
    assert (await sql_store.get_by_id_and_owner(99, "sarah1")).amount == Decimal("123.45")
    assert await sql_store.get_by_id_and_owner(99, "kumar2") is None
    assert await sql_store.get_by_id_and_owner(4242, "sarah1") is None


async def test_list_by_owner_default_order_and_total(sql_store):
    page = await sql_store.list_by_owner("sarah1", PageRequest())
    assert [c.id for c in page.items] == [100, 99, 101]
    assert page.total == 3


async def test_list_by_owner_descending_window(sql_store):
    page = await sql_store.list_by_owner(
        "sarah1",
        PageRequest(page_index=0, page_size=1, sort_direction=SortDirection.DESC),
    )
    assert [c.amount for c in page.items] == [Decimal("150.00")]


async def test_list_by_owner_second_page_and_past_end(sql_store):
    second = await sql_store.list_by_owner("sarah1", PageRequest(page_index=1, page_size=2))
    assert [c.id for c in second.items] == [101]
    beyond = await sql_store.list_by_owner("sarah1", PageRequest(page_index=4, page_size=2))
    assert beyond.items == []
    assert beyond.total == 3


async def test_list_ties_broken_by_ascending_id(sql_store):
    a = await sql_store.create(Decimal("5.00"), "tie")
    b = await sql_store.create(Decimal("5.00"), "tie")
    page = await sql_store.list_by_owner(
        "tie", PageRequest(sort_direction=SortDirection.DESC),
    )
    assert [c.id for c in page.items] == [a.id, b.id]


async def test_save_updates_existing_row(sql_store):
    saved = await sql_store.save(Card(id=99, amount=Decimal("-1.50"), owner="sarah1"))
    assert saved.id == 99
    reloaded = await sql_store.get_by_id_and_owner(99, "sarah1")
    assert reloaded.amount == Decimal("-1.50")


async def test_save_without_id_inserts(sql_store):
    saved = await sql_store.save(Card(id=None, amount=Decimal("3.00"), owner="kumar2"))
    assert saved.id is not None
    assert await sql_store.exists_by_id_and_owner(saved.id, "kumar2")


async def test_exists_and_delete(sql_store):
    assert await sql_store.exists_by_id_and_owner(102, "kumar2") is True
    assert await sql_store.exists_by_id_and_owner(102, "sarah1") is False
    await sql_store.delete_by_id(102)
    assert await sql_store.exists_by_id_and_owner(102, "kumar2") is False


async def test_sqlalchemy_failure_becomes_storage_failure(sql_store, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(sql_store._db, "execute", broken_execute)
    with pytest.raises(StorageFailureError) as exc:
        await sql_store.get_by_id_and_owner(99, "sarah1")
    assert exc.value.operation == "get"


@pytest.mark.parametrize("card_id", [2**63, 99999999999999999999, -(2**63) - 1])
async def test_ids_outside_column_range_match_nothing(sql_store, card_id):
    assert await sql_store.get_by_id_and_owner(card_id, "sarah1") is None
    assert await sql_store.exists_by_id_and_owner(card_id, "sarah1") is False
    await sql_store.delete_by_id(card_id)
    assert (await sql_store.list_by_owner("sarah1", PageRequest())).total == 3


async def test_offset_beyond_column_range_is_empty_window(sql_store):
    page = await sql_store.list_by_owner(
        "sarah1", PageRequest(page_index=100000000000000000, page_size=100),
    )
    assert page.items == []
    assert page.total == 3
