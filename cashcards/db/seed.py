"""Demo accounts and cards.

``sarah1`` and ``kumar2`` are card owners; ``hank-owns-no-cards`` can log
in but holds the ``viewer`` role and is refused by the card API.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from cashcards.db.models import CashCard as CashCardModel
from cashcards.modules.accounts import CARD_OWNER_ROLE, VIEWER_ROLE, AccountCreateInput, AccountService
from cashcards.modules.cards import to_cents

DEMO_ACCOUNTS = (
    ("sarah1", "abc123", CARD_OWNER_ROLE),
    ("kumar2", "xyz789", CARD_OWNER_ROLE),
    ("hank-owns-no-cards", "qrs456", VIEWER_ROLE),
)

DEMO_CARDS = (
    (99, Decimal("123.45"), "sarah1"),
    (100, Decimal("1.00"), "sarah1"),
    (101, Decimal("150.00"), "sarah1"),
    (102, Decimal("200.00"), "kumar2"),
)


async def seed_demo_data(session: AsyncSession) -> bool:
    """Insert the demo rows; returns False when they are already present."""
    service = AccountService.with_session(session)
    if await service.get_by_username(DEMO_ACCOUNTS[0][0]) is not None:
        return False

    for username, password, role in DEMO_ACCOUNTS:
        await service.create_account(
            AccountCreateInput(username=username, password=password, role=role)
        )
    for card_id, amount, owner in DEMO_CARDS:
        session.add(CashCardModel(id=card_id, amount_cents=to_cents(amount), owner=owner))
    await session.flush()
    return True
