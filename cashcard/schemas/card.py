"""Card Schemas — Pydantic request/response models for the /cashcards API.

Invariants:
    - Request bodies accept amount only; id/owner in a payload are dropped silently
    - amount must be a finite decimal (no NaN/Infinity), sign unrestricted
    - amount fits NUMERIC(19, 2): at most 2 fractional and 17 integer digits,
      so both stores hold exactly what the client sent
    - Responses serialize amount as a JSON number

Design Decisions:
    - extra="ignore" over extra="forbid": clients may echo a full card back on PUT
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from cashcard.core.card import Card

JsonAmount = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]

# mirrors the cash_card.amount column
AmountInput = Annotated[Decimal, Field(max_digits=19, decimal_places=2)]


class CardCreate(BaseModel):
    """POST body: server assigns id and owner."""
    model_config = ConfigDict(extra="ignore")

    amount: AmountInput


class CardUpdate(BaseModel):
    """PUT body: only amount is honored."""
    model_config = ConfigDict(extra="ignore")

    amount: AmountInput


class CardResponse(BaseModel):
    id: int
    amount: JsonAmount
    owner: str

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(id=card.id, amount=card.amount, owner=card.owner)
