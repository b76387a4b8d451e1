"""Pagination/Sort Engine — turns raw page parameters into a deterministic window.

Invariants:
    - page_index >= 0 and page_size > 0 for every PageRequest
    - Only SortField members are accepted; unknown fields fail fast (never defaulted)
    - An absent sort falls back to amount ascending
    - Ordering is total: ties on the sort field broken by ascending id
    - Windows past the end of the record set are empty, not an error

Design Decisions:
    - Pure functions, no IO: the SQL store and the in-memory store share the same
      PageRequest so both produce identical windows
    - size above max_page_size is clamped, not rejected (matches the paging defaults
      clients already rely on)
"""

from dataclasses import dataclass
from typing import Iterable

from cashcard.core.card import Card
from cashcard.core.domain_types import SortDirection, SortField
from cashcard.core.errors import InvalidParameterError

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_field: SortField = SortField.AMOUNT
    sort_direction: SortDirection = SortDirection.ASC

    def __post_init__(self):
        if self.page_index < 0:
            raise InvalidParameterError(
                f"page must be >= 0, got {self.page_index}", "page",
            )
        if self.page_size <= 0:
            raise InvalidParameterError(
                f"size must be > 0, got {self.page_size}", "size",
            )

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size

    @property
    def descending(self) -> bool:
        return self.sort_direction is SortDirection.DESC


def parse_sort(sort: str | None) -> tuple[SortField, SortDirection]:
    """Parse 'field[,direction]' into enums. None or blank → amount ascending."""
    if sort is None or not sort.strip():
        return SortField.AMOUNT, SortDirection.ASC

    parts = [p.strip() for p in sort.split(",")]
    if len(parts) > 2:
        raise InvalidParameterError(
            f"sort must be 'field' or 'field,direction', got '{sort}'", "sort",
        )
    try:
        field = SortField(parts[0])
    except ValueError:
        raise InvalidParameterError(
            f"Unsupported sort field '{parts[0]}'", "sort",
        ) from None

    if len(parts) == 1 or not parts[1]:
        return field, SortDirection.ASC
    try:
        direction = SortDirection(parts[1].lower())
    except ValueError:
        raise InvalidParameterError(
            f"Unsupported sort direction '{parts[1]}'", "sort",
        ) from None
    return field, direction


def build_page_request(
    page: int | None = None,
    size: int | None = None,
    sort: str | None = None,
    default_size: int = DEFAULT_PAGE_SIZE,
    max_size: int = MAX_PAGE_SIZE,
) -> PageRequest:
    """Apply defaults and limits to raw list parameters."""
    page_index = 0 if page is None else page
    page_size = default_size if size is None else size
    if page_size > max_size:
        page_size = max_size
    field, direction = parse_sort(sort)
    return PageRequest(
        page_index=page_index,
        page_size=page_size,
        sort_field=field,
        sort_direction=direction,
    )


# one entry per SortField member
_SORT_KEYS = {
    SortField.AMOUNT: lambda card: card.amount,
}


def apply_window(cards: Iterable[Card], request: PageRequest) -> list[Card]:
    """Order cards per the request (id tie-break ascending) and slice the window."""
    # stable sorts: id first, then the sort field in the requested direction
    ordered = sorted(cards, key=lambda c: c.id)
    ordered.sort(
        key=_SORT_KEYS[request.sort_field],
        reverse=request.descending,
    )
    return ordered[request.offset:request.offset + request.page_size]
