"""Ownership Guard — foreign cards look exactly like missing cards."""

import pytest

from cashcard.core.errors import CardNotFoundError
from cashcard.services.ownership_guard import OwnershipGuard


async def test_find_owned_returns_own_card(store):
    card = await OwnershipGuard(store).find_owned(99, "sarah1")
    assert card is not None
    assert card.owner == "sarah1"


async def test_foreign_and_missing_cards_both_return_none(store):
    guard = OwnershipGuard(store)
    assert await guard.find_owned(102, "sarah1") is None
    assert await guard.find_owned(9999, "sarah1") is None


async def test_require_owned_raises_same_error_for_foreign_and_missing(store):
    guard = OwnershipGuard(store)
    with pytest.raises(CardNotFoundError) as foreign:
        await guard.require_owned(102, "sarah1")
    with pytest.raises(CardNotFoundError) as missing:
        await guard.require_owned(9999, "sarah1")
    assert foreign.value.code == missing.value.code
    assert foreign.value.http_status == missing.value.http_status


async def test_owns(store):
    guard = OwnershipGuard(store)
    assert await guard.owns(102, "kumar2") is True
    assert await guard.owns(102, "sarah1") is False
