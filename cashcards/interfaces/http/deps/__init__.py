"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .account import get_account_repository, get_account_service
from .cards import get_card_repository, get_card_service

__all__ = [
    "get_db_session",
    "get_account_repository",
    "get_account_service",
    "get_card_repository",
    "get_card_service",
]
