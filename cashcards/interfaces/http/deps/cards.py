"""Cash card dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cashcards.core.config import get_settings
from cashcards.infrastructure.database.repositories import SqlCardRepository
from cashcards.modules.cards import CardService

from .database import get_db_session


def get_card_repository(db: AsyncSession = Depends(get_db_session)) -> SqlCardRepository:
    return SqlCardRepository(db)


def get_card_service(repository: SqlCardRepository = Depends(get_card_repository)) -> CardService:
    settings = get_settings()
    return CardService(
        repository,
        default_page_size=settings.paging.default_size,
        max_page_size=settings.paging.max_size,
    )


__all__ = [
    "get_card_repository",
    "get_card_service",
]
