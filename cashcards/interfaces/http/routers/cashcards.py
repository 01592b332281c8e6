"""Cash card endpoints.

Every route is scoped to the authenticated card owner. A card that belongs
to another owner answers exactly like a missing one: 404 with an empty body.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from cashcards.core.security import get_current_card_owner
from cashcards.interfaces.http.deps import get_card_service
from cashcards.modules.accounts import Account
from cashcards.modules.cards import CardOutcome, CardService, OutcomeKind
from cashcards.schemas import CashCardRequest, CashCardResponse

router = APIRouter()


def _to_schema(card) -> CashCardResponse:
    return CashCardResponse.model_validate(card)


def _error_response(outcome: CardOutcome) -> Response:
    if outcome.kind is OutcomeKind.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if outcome.kind is OutcomeKind.VALIDATION_ERROR:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": outcome.detail})
    if outcome.kind is OutcomeKind.FORBIDDEN:
        return Response(status_code=status.HTTP_403_FORBIDDEN)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a cash card")
async def create_cash_card(
    payload: CashCardRequest,
    request: Request,
    account: Account = Depends(get_current_card_owner),
    service: CardService = Depends(get_card_service),
):
    outcome = await service.create_card(account.identity, payload.amount)
    if not outcome.ok:
        return _error_response(outcome)
    location = request.url_for("get_cash_card", card_id=outcome.value.id)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": str(location)})


@router.get("/{card_id}", response_model=CashCardResponse, name="get_cash_card", summary="Fetch one cash card")
async def get_cash_card(
    card_id: int,
    account: Account = Depends(get_current_card_owner),
    service: CardService = Depends(get_card_service),
):
    outcome = await service.get_card(account.identity, card_id)
    if not outcome.ok:
        return _error_response(outcome)
    return _to_schema(outcome.value)


@router.get("", response_model=list[CashCardResponse], summary="List the caller's cash cards")
async def list_cash_cards(
    page: int = Query(0),
    size: Optional[int] = Query(None),
    sort: list[str] = Query(default=[]),
    account: Account = Depends(get_current_card_owner),
    service: CardService = Depends(get_card_service),
):
    outcome = await service.list_cards(account.identity, page=page, size=size, sort=sort)
    if not outcome.ok:
        return _error_response(outcome)
    return [_to_schema(card) for card in outcome.value.items]


@router.put("/{card_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Replace a cash card's amount")
async def update_cash_card(
    card_id: int,
    payload: CashCardRequest,
    account: Account = Depends(get_current_card_owner),
    service: CardService = Depends(get_card_service),
):
    outcome = await service.update_card(account.identity, card_id, payload.amount)
    if not outcome.ok:
        return _error_response(outcome)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
