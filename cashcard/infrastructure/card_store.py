"""SQL Card Store — SQLAlchemy implementation of the CardStore protocol.

Invariants:
    - Every owner-scoped statement carries WHERE owner = :owner, written out explicitly
    - Listing orders by (sort field, id ASC) so windows are stable between calls
    - Each write commits its own transaction (single-record atomicity)
    - SQLAlchemy failures roll back and surface as StorageFailureError
    - Ids and offsets beyond the 64-bit column range never reach the driver:
      such ids match nothing and such offsets yield an empty window

Design Decisions:
    - Explicit select()/delete() statements instead of name-derived query methods
    - save() uses session.merge(): upsert by primary key, insert when id is None
"""

import logging
from contextlib import asynccontextmanager
from decimal import Decimal

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard.core.card import Card, CardPage
from cashcard.core.domain_types import (
    MAX_STORED_INT, CardId, Owner, SortField, is_storable_id,
)
from cashcard.core.errors import StorageFailureError
from cashcard.core.pagination import PageRequest
from cashcard.models.card import CashCard

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    SortField.AMOUNT: CashCard.amount,
}


class SqlCardStore:
    """Card persistence over one request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _storage(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Card store {operation} failed: {e}",
                extra={"operation": operation},
            )
            raise StorageFailureError(type(e).__name__, operation) from e

    async def create(self, amount: Decimal, owner: Owner) -> Card:
        async with self._storage("create"):
            row = CashCard(amount=amount, owner=owner)
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row)
            return row.to_domain()

    async def get_by_id_and_owner(
        self, card_id: CardId, owner: Owner,
    ) -> Card | None:
        if not is_storable_id(card_id):
            return None
        async with self._storage("get"):
            result = await self._db.execute(
                select(CashCard).where(
                    CashCard.id == card_id, CashCard.owner == owner,
                ),
            )
            row = result.scalar_one_or_none()
            return row.to_domain() if row else None

    async def list_by_owner(
        self, owner: Owner, page_request: PageRequest,
    ) -> CardPage:
        column = _SORT_COLUMNS[page_request.sort_field]
        order = column.desc() if page_request.descending else column.asc()
        async with self._storage("list"):
            rows = []
            if page_request.offset <= MAX_STORED_INT:
                result = await self._db.execute(
                    select(CashCard)
                    .where(CashCard.owner == owner)
                    .order_by(order, CashCard.id.asc())
                    .offset(page_request.offset)
                    .limit(page_request.page_size),
                )
                rows = result.scalars().all()
            total = await self._db.scalar(
                select(func.count())
                .select_from(CashCard)
                .where(CashCard.owner == owner),
            )
        return CardPage(items=[r.to_domain() for r in rows], total=total or 0)

    async def save(self, card: Card) -> Card:
        async with self._storage("save"):
            row = await self._db.merge(
                CashCard(id=card.id, amount=card.amount, owner=card.owner),
            )
            await self._db.commit()
            await self._db.refresh(row)
            return row.to_domain()

    async def exists_by_id_and_owner(
        self, card_id: CardId, owner: Owner,
    ) -> bool:
        if not is_storable_id(card_id):
            return False
        async with self._storage("exists"):
            count = await self._db.scalar(
                select(func.count())
                .select_from(CashCard)
                .where(CashCard.id == card_id, CashCard.owner == owner),
            )
            return bool(count)

    async def delete_by_id(self, card_id: CardId) -> None:
        if not is_storable_id(card_id):
            return
        async with self._storage("delete"):
            await self._db.execute(
                delete(CashCard).where(CashCard.id == card_id),
            )
            await self._db.commit()
