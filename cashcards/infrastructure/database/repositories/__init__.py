"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .card_repository import SqlCardRepository

__all__ = [
    "SqlAccountRepository",
    "SqlCardRepository",
]
