"""SQLAlchemy implementation of the cash card store."""

from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cashcards.db.models import CashCard as CashCardModel
from cashcards.modules.cards.exceptions import CardNotFoundError, CardStoreError
from cashcards.modules.cards.models import CashCard, from_cents, to_cents
from cashcards.modules.cards.paging import CardPage, Direction, PageRequest, SortField

# SQLite and most SQL backends bind integers as signed 64-bit values
_MIN_SQL_INTEGER = -(2**63)
_MAX_SQL_INTEGER = 2**63 - 1

_SORT_COLUMNS = {
    SortField.ID: CashCardModel.id,
    SortField.AMOUNT: CashCardModel.amount_cents,
}


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise CardStoreError(f"cash card {operation} failed") from exc


def _storable_id(card_id: int) -> bool:
    return _MIN_SQL_INTEGER <= card_id <= _MAX_SQL_INTEGER


class SqlCardRepository:
    """Cash card store backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, *, owner: str, amount: Decimal) -> CashCard:
        model = CashCardModel(owner=owner, amount_cents=to_cents(amount))
        with _store_errors("insert"):
            self._session.add(model)
            await self._session.flush()
        return self._to_domain(model)

    async def get_by_id(self, card_id: int) -> CashCard | None:
        if not _storable_id(card_id):
            return None
        stmt = select(CashCardModel).where(CashCardModel.id == card_id)
        with _store_errors("lookup"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_by_id_and_owner(self, card_id: int, owner: str) -> CashCard | None:
        if not _storable_id(card_id):
            return None
        stmt = select(CashCardModel).where(
            CashCardModel.id == card_id,
            CashCardModel.owner == owner,
        )
        with _store_errors("lookup"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_owner(self, owner: str, page_request: PageRequest) -> CardPage:
        ordering = []
        for order in page_request.sort:
            column = _SORT_COLUMNS[order.field]
            ordering.append(column.desc() if order.direction is Direction.DESC else column.asc())
        # ids grow with insertion order, which keeps equal sort keys stable across pages
        ordering.append(CashCardModel.id.asc())

        query = (
            select(CashCardModel)
            .where(CashCardModel.owner == owner)
            .order_by(*ordering)
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        count_query = select(func.count(CashCardModel.id)).where(CashCardModel.owner == owner)

        with _store_errors("listing"):
            models = []
            # an offset past the integer range lies beyond any stored row
            if page_request.offset <= _MAX_SQL_INTEGER:
                result = await self._session.execute(query)
                models = result.scalars().all()
            total = (await self._session.execute(count_query)).scalar() or 0

        return CardPage(
            items=[self._to_domain(model) for model in models],
            total=int(total),
            request=page_request,
        )

    async def update(self, card: CashCard) -> None:
        if not _storable_id(card.id):
            raise CardNotFoundError(card.id)
        stmt = (
            update(CashCardModel)
            .where(CashCardModel.id == card.id)
            .values(amount_cents=to_cents(card.amount))
            .execution_options(synchronize_session="evaluate")
        )
        with _store_errors("update"):
            result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise CardNotFoundError(card.id)

    async def exists(self, card_id: int) -> bool:
        if not _storable_id(card_id):
            return False
        stmt = select(CashCardModel.id).where(CashCardModel.id == card_id).limit(1)
        with _store_errors("lookup"):
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none() is not None

    @staticmethod
    def _to_domain(model: CashCardModel) -> CashCard:
        return CashCard(
            id=model.id,
            amount=from_cents(model.amount_cents),
            owner=model.owner,
        )
