"""In-Memory Card Store — dict-backed CardStore for unit tests and ephemeral runs.

Invariants:
    - Ids are issued above the highest id ever stored, never reused
    - Owner filtering happens before pagination, never after
    - No await points inside an operation: each call is atomic on the event loop
"""

from decimal import Decimal

from cashcard.core.card import Card, CardPage
from cashcard.core.domain_types import CardId, Owner
from cashcard.core.pagination import PageRequest, apply_window


class InMemoryCardStore:
    def __init__(self, cards: list[Card] | None = None):
        self._cards: dict[CardId, Card] = {}
        self._last_id = 0
        for card in cards or []:
            self._put(card)

    def _put(self, card: Card) -> Card:
        if card.id is None:
            self._last_id += 1
            card = Card(id=CardId(self._last_id), amount=card.amount, owner=card.owner)
        else:
            self._last_id = max(self._last_id, card.id)
        self._cards[card.id] = card
        return card

    def _owned(self, card_id: CardId, owner: Owner) -> Card | None:
        card = self._cards.get(card_id)
        if card is None or card.owner != owner:
            return None
        return card

    async def create(self, amount: Decimal, owner: Owner) -> Card:
        return self._put(Card(id=None, amount=amount, owner=owner))

    async def get_by_id_and_owner(
        self, card_id: CardId, owner: Owner,
    ) -> Card | None:
        return self._owned(card_id, owner)

    async def list_by_owner(
        self, owner: Owner, page_request: PageRequest,
    ) -> CardPage:
        owned = [c for c in self._cards.values() if c.owner == owner]
        return CardPage(items=apply_window(owned, page_request), total=len(owned))

    async def save(self, card: Card) -> Card:
        return self._put(card)

    async def exists_by_id_and_owner(
        self, card_id: CardId, owner: Owner,
    ) -> bool:
        return self._owned(card_id, owner) is not None

    async def delete_by_id(self, card_id: CardId) -> None:
        self._cards.pop(card_id, None)
