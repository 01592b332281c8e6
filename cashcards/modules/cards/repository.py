"""Repository protocol for cash card persistence."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from .models import CashCard
from .paging import CardPage, PageRequest


class CardRepository(Protocol):
    """Store contract. Implementations never check ownership on ``update``."""

    async def insert(self, *, owner: str, amount: Decimal) -> CashCard:
        ...

    async def get_by_id(self, card_id: int) -> CashCard | None:
        ...

    async def get_by_id_and_owner(self, card_id: int, owner: str) -> CashCard | None:
        ...

    async def list_by_owner(self, owner: str, page_request: PageRequest) -> CardPage:
        ...

    async def update(self, card: CashCard) -> None:
        ...

    async def exists(self, card_id: int) -> bool:
        ...
