"""Ownership policy for cash cards.

A card is visible to a caller if and only if ``card.owner == caller``. For
direct fetches and mutations a card owned by someone else is reported
exactly like a card that does not exist, so callers cannot probe for other
owners' ids.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cashcards.modules.accounts.models import Account

from .models import CashCard


class Decision(str, Enum):
    ALLOW = "allow"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True, slots=True)
class AccessDecision:
    kind: Decision
    card: Optional[CashCard] = None

    @property
    def allowed(self) -> bool:
        return self.kind is Decision.ALLOW


def decide(caller: str, card: Optional[CashCard], *, conceal_foreign: bool = True) -> AccessDecision:
    if card is None:
        return AccessDecision(Decision.NOT_FOUND)
    if card.owner != caller:
        if conceal_foreign:
            return AccessDecision(Decision.NOT_FOUND)
        return AccessDecision(Decision.FORBIDDEN)
    return AccessDecision(Decision.ALLOW, card)


def may_use_cards(account: Account) -> bool:
    """Resource-class check, evaluated before any per-card decision."""
    return account.is_active and account.is_card_owner()
