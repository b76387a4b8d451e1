"""Card Entity — immutable id/amount/owner triple passed between store and facade.

Invariants:
    - id is None only before the store assigns one
    - owner never changes after creation; with_amount() preserves id and owner
    - amount is a Decimal, sign unrestricted

Design Decisions:
    - Frozen dataclass decoupled from the ORM row: core never imports SQLAlchemy
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from cashcard.core.domain_types import CardId, Owner


@dataclass(frozen=True)
class Card:
    id: CardId | None
    amount: Decimal
    owner: Owner

    def with_amount(self, amount: Decimal) -> "Card":
        """Copy with a new amount; id and owner carried over untouched."""
        return replace(self, amount=amount)


@dataclass(frozen=True)
class CardPage:
    """One page window plus the owner's total record count."""
    items: list[Card]
    total: int
