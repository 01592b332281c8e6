"""Page requests and sort keys for listing a caller's cards.

Sort parameters follow the ``field[,field...][,direction]`` form, for
example ``amount,desc`` or ``id``. Field names are mapped onto the closed
:class:`SortField` enumeration here so no client string ever reaches the
query layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from .exceptions import InvalidPageRequestError
from .models import CashCard


class SortField(str, Enum):
    ID = "id"
    AMOUNT = "amount"


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortOrder:
    field: SortField
    direction: Direction = Direction.ASC


DEFAULT_SORT: tuple[SortOrder, ...] = (SortOrder(SortField.AMOUNT, Direction.ASC),)


def parse_sort(params: Iterable[str]) -> tuple[SortOrder, ...]:
    orders: list[SortOrder] = []
    for raw in params:
        tokens = [token.strip() for token in raw.split(",") if token.strip()]
        if not tokens:
            continue
        direction = Direction.ASC
        if len(tokens) > 1 and tokens[-1].lower() in {d.value for d in Direction}:
            direction = Direction(tokens.pop().lower())
        for name in tokens:
            try:
                sort_field = SortField(name)
            except ValueError:
                raise InvalidPageRequestError(f"unknown sort field: {name}") from None
            orders.append(SortOrder(sort_field, direction))
    return tuple(orders) or DEFAULT_SORT


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = DEFAULT_SORT

    @classmethod
    def of(
        cls,
        page: int,
        size: int,
        sort: Optional[Iterable[SortOrder]] = None,
        *,
        max_size: Optional[int] = None,
    ) -> "PageRequest":
        if page < 0:
            raise InvalidPageRequestError("page must not be negative")
        if size <= 0:
            raise InvalidPageRequestError("size must be greater than zero")
        if max_size is not None:
            size = min(size, max_size)
        orders = tuple(sort) if sort else DEFAULT_SORT
        return cls(page=page, size=size, sort=orders)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(slots=True)
class CardPage:
    items: list[CashCard]
    total: int
    request: PageRequest = field(default_factory=PageRequest)

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.request.size)

    @property
    def has_next(self) -> bool:
        return self.request.page + 1 < self.total_pages
