"""In-Memory Card Store — id issuance and owner scoping."""

from decimal import Decimal

from cashcard.core.card import Card
from cashcard.core.pagination import PageRequest
from cashcard.infrastructure.memory_store import InMemoryCardStore


async def test_ids_continue_after_seeded_ids():
    store = InMemoryCardStore([Card(id=41, amount=Decimal("1"), owner="a")])
    created = await store.create(Decimal("2"), "a")
    assert created.id == 42


async def test_ids_not_reused_after_delete():
    store = InMemoryCardStore()
    first = await store.create(Decimal("1"), "a")
    await store.delete_by_id(first.id)
    second = await store.create(Decimal("1"), "a")
    assert second.id != first.id


async def test_list_filters_before_paging():
    store = InMemoryCardStore([
        Card(id=1, amount=Decimal("1"), owner="b"),
        Card(id=2, amount=Decimal("2"), owner="a"),
        Card(id=3, amount=Decimal("3"), owner="a"),
    ])
    page = await store.list_by_owner("a", PageRequest(page_size=1))
    assert [c.id for c in page.items] == [2]
    assert page.total == 2


async def test_delete_missing_id_is_noop():
    store = InMemoryCardStore()
    await store.delete_by_id(123)
