from decimal import Decimal

from cashcards.modules.accounts import CARD_OWNER_ROLE, VIEWER_ROLE, Account
from cashcards.modules.cards import CashCard, Decision, decide, may_use_cards

CARD = CashCard(id=99, amount=Decimal("123.45"), owner="sarah1")


def _account(role: str, is_active: bool = True) -> Account:
    return Account(id="a-1", username="someone", role=role, is_active=is_active, password_hash="x")


def test_missing_card_is_not_found():
    assert decide("sarah1", None).kind is Decision.NOT_FOUND


def test_owner_is_allowed_and_gets_the_card():
    decision = decide("sarah1", CARD)
    assert decision.allowed
    assert decision.card is CARD


def test_foreign_card_is_reported_as_not_found():
    decision = decide("kumar2", CARD)
    assert decision.kind is Decision.NOT_FOUND
    assert decision.card is None


def test_foreign_card_is_forbidden_only_when_not_concealed():
    assert decide("kumar2", CARD, conceal_foreign=False).kind is Decision.FORBIDDEN
    assert decide("kumar2", None, conceal_foreign=False).kind is Decision.NOT_FOUND


def test_identity_comparison_is_exact():
    assert not decide("Sarah1", CARD).allowed
    assert not decide("sarah1 ", CARD).allowed


def test_only_active_card_owners_may_use_cards():
    assert may_use_cards(_account(CARD_OWNER_ROLE))
    assert not may_use_cards(_account(VIEWER_ROLE))
    assert not may_use_cards(_account(CARD_OWNER_ROLE, is_active=False))
