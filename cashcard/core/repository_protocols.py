"""Boundary Protocols — contract between the card core and its record store.

Invariants:
    - Core NEVER imports from infrastructure: dependency arrows point inward only
    - Every owner-scoped method takes the owner explicitly; there is no owner-less listing
    - get_by_id_and_owner returns None for both "missing" and "owned by someone else"

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory stores share no base
    - Async in Protocol: implementations do IO; pagination stays pure in core/pagination.py
"""

from decimal import Decimal
from typing import Protocol

from cashcard.core.card import Card, CardPage
from cashcard.core.domain_types import CardId, Owner
from cashcard.core.pagination import PageRequest


class CardStore(Protocol):
    """Contract for cash card persistence: implemented by infrastructure."""
    async def create(self, amount: Decimal, owner: Owner) -> Card: ...
    async def get_by_id_and_owner(
        self, card_id: CardId, owner: Owner,
    ) -> Card | None: ...
    async def list_by_owner(
        self, owner: Owner, page_request: PageRequest,
    ) -> CardPage: ...
    async def save(self, card: Card) -> Card: ...
    async def exists_by_id_and_owner(
        self, card_id: CardId, owner: Owner,
    ) -> bool: ...
    async def delete_by_id(self, card_id: CardId) -> None: ...
