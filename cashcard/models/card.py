"""Cash Card ORM — the single flat table of owner-scoped monetary records.

Invariants:
    - id is an autoincrement integer primary key, unique across all owners
    - owner is non-nullable and indexed (every query filters on it)
    - amount is NUMERIC, sign unrestricted

Design Decisions:
    - to_domain() keeps the ORM row out of services and routes
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from cashcard.core.card import Card
from cashcard.core.domain_types import CardId, Owner
from cashcard.db.base import Base


class CashCard(Base):
    """A monetary record bound to exactly one owner."""
    __tablename__ = "cash_card"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 2, asdecimal=True), nullable=False,
    )
    owner: Mapped[str] = mapped_column(
        String(256), nullable=False, index=True,
    )

    def to_domain(self) -> Card:
        return Card(id=CardId(self.id), amount=self.amount, owner=Owner(self.owner))
