"""Card Operations — the five use-cases the HTTP layer calls.

Invariants:
    - caller is always an explicit argument, never read from ambient request state
    - id and owner are derived server-side; update rewrites amount only
    - list always filters by the caller; there is no owner parameter to override
    - Every failure is exactly one of CardNotFoundError, InvalidParameterError,
      StorageFailureError: nothing is swallowed, nothing is retried here

Design Decisions:
    - Store injected through the constructor; routes build one per request
    - Failures raised as typed exceptions, mapped to HTTP by the global handlers
    - delete uses exists_by_id_and_owner + delete_by_id so a foreign card yields the
      same NotFound as a missing one
"""

import logging
from decimal import Decimal

from cashcard.core.card import Card
from cashcard.core.domain_types import CardId, Owner
from cashcard.core.errors import CardNotFoundError
from cashcard.core.pagination import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, build_page_request,
)
from cashcard.core.repository_protocols import CardStore
from cashcard.services.ownership_guard import OwnershipGuard

logger = logging.getLogger(__name__)


class CardOperations:
    """Facade composing the ownership guard and pagination over a CardStore."""

    def __init__(
        self,
        store: CardStore,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self.store = store
        self.guard = OwnershipGuard(store)
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def create(self, amount: Decimal, caller: Owner) -> Card:
        """Persist a new card owned by the caller."""
        card = await self.store.create(amount, caller)
        logger.info(
            f"Created card {card.id}",
            extra={"card_id": card.id, "owner": caller, "operation": "create"},
        )
        return card

    async def fetch_one(self, card_id: CardId, caller: Owner) -> Card:
        return await self.guard.require_owned(card_id, caller)

    async def list(
        self,
        caller: Owner,
        page: int | None = None,
        size: int | None = None,
        sort: str | None = None,
    ) -> list[Card]:
        """One page of the caller's cards, amount ascending unless sort says otherwise."""
        page_request = build_page_request(
            page, size, sort,
            default_size=self.default_page_size,
            max_size=self.max_page_size,
        )
        result = await self.store.list_by_owner(caller, page_request)
        return result.items

    async def update(
        self, card_id: CardId, caller: Owner, amount: Decimal,
    ) -> Card:
        """Overwrite the amount of an owned card; id and owner are preserved."""
        existing = await self.guard.require_owned(card_id, caller)
        updated = await self.store.save(existing.with_amount(amount))
        logger.info(
            f"Updated card {card_id}",
            extra={"card_id": card_id, "owner": caller, "operation": "update"},
        )
        return updated

    async def delete(self, card_id: CardId, caller: Owner) -> None:
        if not await self.guard.owns(card_id, caller):
            logger.info(
                f"Card {card_id} not visible to caller",
                extra={"card_id": card_id, "owner": caller},
            )
            raise CardNotFoundError(card_id)
        await self.store.delete_by_id(card_id)
        logger.info(
            f"Deleted card {card_id}",
            extra={"card_id": card_id, "owner": caller, "operation": "delete"},
        )
