"""Ownership Guard — binds every single-card read/write to the caller's identity.

Invariants:
    - A card owned by someone else is indistinguishable from a missing card
    - The guard never calls an id-only lookup; owner is always part of the query
    - create and list need no guard (owner is the caller / owner-filtered query)
"""

import logging

from cashcard.core.card import Card
from cashcard.core.domain_types import CardId, Owner
from cashcard.core.errors import CardNotFoundError
from cashcard.core.repository_protocols import CardStore

logger = logging.getLogger(__name__)


class OwnershipGuard:
    """Owner-scoped lookups over a CardStore."""

    def __init__(self, store: CardStore):
        self.store = store

    async def find_owned(self, card_id: CardId, caller: Owner) -> Card | None:
        return await self.store.get_by_id_and_owner(card_id, caller)

    async def require_owned(self, card_id: CardId, caller: Owner) -> Card:
        """Return the caller's card or raise CardNotFoundError."""
        card = await self.find_owned(card_id, caller)
        if card is None:
            logger.info(
                f"Card {card_id} not visible to caller",
                extra={"card_id": card_id, "owner": caller},
            )
            raise CardNotFoundError(card_id)
        return card

    async def owns(self, card_id: CardId, caller: Owner) -> bool:
        return await self.store.exists_by_id_and_owner(card_id, caller)
