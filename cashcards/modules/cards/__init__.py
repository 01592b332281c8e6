"""Cash card domain exports."""

from .exceptions import (
    CardError,
    CardNotFoundError,
    CardStoreError,
    CardValidationError,
    InvalidAmountError,
    InvalidPageRequestError,
)
from .models import CashCard, from_cents, parse_amount, to_cents
from .outcomes import CardOutcome, OutcomeKind
from .paging import DEFAULT_SORT, CardPage, Direction, PageRequest, SortField, SortOrder, parse_sort
from .policy import AccessDecision, Decision, decide, may_use_cards
from .service import CardService

__all__ = [
    "AccessDecision",
    "CardError",
    "CardNotFoundError",
    "CardOutcome",
    "CardPage",
    "CardService",
    "CardStoreError",
    "CardValidationError",
    "CashCard",
    "DEFAULT_SORT",
    "Decision",
    "Direction",
    "InvalidAmountError",
    "InvalidPageRequestError",
    "OutcomeKind",
    "PageRequest",
    "SortField",
    "SortOrder",
    "decide",
    "from_cents",
    "may_use_cards",
    "parse_amount",
    "parse_sort",
    "to_cents",
]
