"""Cash Card Routes — HTTP adapter over CardOperations.

Invariants:
    - Every route depends on require_card_owner: 401 without credentials, 403 without role
    - The owner passed to CardOperations is the authenticated username, never the body
    - NotFound → 404, InvalidParameter → 400 via global CashCardError handler
    - create → 201 + Location, update/delete → 204, fetch/list → 200

Design Decisions:
    - get_card_operations is the composition root: one SqlCardStore per request session
    - List returns a bare JSON array (page content only, no envelope)
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard.config import get_settings
from cashcard.core.domain_types import CardId, Owner
from cashcard.infrastructure.card_store import SqlCardStore
from cashcard.infrastructure.database import get_db
from cashcard.infrastructure.security import require_card_owner
from cashcard.schemas.card import CardCreate, CardResponse, CardUpdate
from cashcard.services.card_operations import CardOperations

router = APIRouter(prefix="/cashcards", tags=["cashcards"])


def get_card_operations(db: AsyncSession = Depends(get_db)) -> CardOperations:
    settings = get_settings()
    return CardOperations(
        SqlCardStore(db),
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


@router.get("/{card_id}", response_model=CardResponse, name="get_cash_card")
async def get_cash_card(
    card_id: int,
    caller: Owner = Depends(require_card_owner),
    ops: CardOperations = Depends(get_card_operations),
):
    card = await ops.fetch_one(CardId(card_id), caller)
    return CardResponse.from_card(card)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_cash_card(
    body: CardCreate,
    request: Request,
    caller: Owner = Depends(require_card_owner),
    ops: CardOperations = Depends(get_card_operations),
):
    """Create a card for the caller; Location points at the new resource."""
    card = await ops.create(body.amount, caller)
    location = request.url_for("get_cash_card", card_id=str(card.id))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.get("", response_model=list[CardResponse])
async def list_cash_cards(
    page: int | None = Query(None),
    size: int | None = Query(None),
    sort: str | None = Query(None),
    caller: Owner = Depends(require_card_owner),
    ops: CardOperations = Depends(get_card_operations),
):
    """Page of the caller's cards. sort takes 'amount' or 'amount,desc'."""
    cards = await ops.list(caller, page=page, size=size, sort=sort)
    return [CardResponse.from_card(c) for c in cards]


@router.put("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_cash_card(
    card_id: int,
    body: CardUpdate,
    caller: Owner = Depends(require_card_owner),
    ops: CardOperations = Depends(get_card_operations),
):
    await ops.update(CardId(card_id), caller, body.amount)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cash_card(
    card_id: int,
    caller: Owner = Depends(require_card_owner),
    ops: CardOperations = Depends(get_card_operations),
):
    await ops.delete(CardId(card_id), caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
