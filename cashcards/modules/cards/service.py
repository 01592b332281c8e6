"""Domain service for owner-scoped cash card operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import CardNotFoundError, CardStoreError, CardValidationError
from .models import CashCard, parse_amount
from .outcomes import CardOutcome
from .paging import CardPage, PageRequest, parse_sort
from .policy import decide
from .repository import CardRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CardService:
    """Create, fetch, list and update cards on behalf of a caller.

    Every method returns a :class:`CardOutcome`; expected business results
    (missing card, bad input) are never raised. Store failures are logged
    here and reported as ``INTERNAL_ERROR`` without detail.
    """

    repository: CardRepository
    default_page_size: int = 20
    max_page_size: int = 2000

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        *,
        default_page_size: int = 20,
        max_page_size: int = 2000,
    ) -> "CardService":
        from cashcards.infrastructure.database.repositories import SqlCardRepository

        return cls(
            SqlCardRepository(session),
            default_page_size=default_page_size,
            max_page_size=max_page_size,
        )

    async def create_card(self, caller: str, amount: Any) -> CardOutcome[CashCard]:
        try:
            value = parse_amount(amount)
        except CardValidationError as exc:
            return CardOutcome.validation_error(str(exc))

        try:
            card = await self.repository.insert(owner=caller, amount=value)
        except CardStoreError:
            logger.exception("Failed to create cash card for %s", caller)
            return CardOutcome.internal_error()

        logger.info("Created cash card %s for %s", card.id, caller)
        return CardOutcome.success(card)

    async def get_card(self, caller: str, card_id: int) -> CardOutcome[CashCard]:
        try:
            card = await self.repository.get_by_id_and_owner(card_id, caller)
        except CardStoreError:
            logger.exception("Failed to load cash card %s", card_id)
            return CardOutcome.internal_error()

        if card is None:
            return CardOutcome.not_found()
        return CardOutcome.success(card)

    async def list_cards(
        self,
        caller: str,
        *,
        page: int = 0,
        size: Optional[int] = None,
        sort: Iterable[str] = (),
    ) -> CardOutcome[CardPage]:
        try:
            page_request = PageRequest.of(
                page,
                self.default_page_size if size is None else size,
                parse_sort(sort),
                max_size=self.max_page_size,
            )
        except CardValidationError as exc:
            return CardOutcome.validation_error(str(exc))

        try:
            result = await self.repository.list_by_owner(caller, page_request)
        except CardStoreError:
            logger.exception("Failed to list cash cards for %s", caller)
            return CardOutcome.internal_error()
        return CardOutcome.success(result)

    async def update_card(self, caller: str, card_id: int, amount: Any) -> CardOutcome[None]:
        try:
            value = parse_amount(amount)
        except CardValidationError as exc:
            return CardOutcome.validation_error(str(exc))

        try:
            # by id only: the policy, not the query, decides on foreign cards
            current = await self.repository.get_by_id(card_id)
            decision = decide(caller, current)
            if not decision.allowed:
                logger.debug("Update of cash card %s by %s concealed as not found", card_id, caller)
                return CardOutcome.not_found()

            assert decision.card is not None
            await self.repository.update(decision.card.with_amount(value))
        except CardNotFoundError:
            return CardOutcome.not_found()
        except CardStoreError:
            logger.exception("Failed to update cash card %s", card_id)
            return CardOutcome.internal_error()

        logger.info("Updated cash card %s for %s", card_id, caller)
        return CardOutcome.success()
