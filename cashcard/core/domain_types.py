"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CardId wraps the store-assigned integer id: never client-supplied
    - Owner wraps the authenticated principal name: never read from a payload
    - Sort fields and directions encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values double as the query-string tokens (amount, asc, desc)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CardId = NewType("CardId", int)
Owner = NewType("Owner", str)

# Largest value a signed 64-bit SQL integer (id column, OFFSET) can hold
MAX_STORED_INT = 2**63 - 1


def is_storable_id(card_id: int) -> bool:
    """True when card_id fits the id column; anything outside can never match a row."""
    return -MAX_STORED_INT - 1 <= card_id <= MAX_STORED_INT


# ─── Enums ───────────────────────────────────────────────────────

class SortField(str, Enum):
    """Fields a card listing may be ordered by."""
    AMOUNT = "amount"


class SortDirection(str, Enum):
    """Ordering direction: ASC is the default when omitted."""
    ASC = "asc"
    DESC = "desc"


class UserRole(str, Enum):
    """Roles granted by the auth layer. Only CARD_OWNER may reach /cashcards."""
    CARD_OWNER = "CARD-OWNER"
    NON_OWNER = "NON-OWNER"
