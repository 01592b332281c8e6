"""Account domain exports."""

from .exceptions import AccountAlreadyExistsError, AccountError
from .models import CARD_OWNER_ROLE, VIEWER_ROLE, Account, AccountCreateInput
from .service import AccountService

__all__ = [
    "CARD_OWNER_ROLE",
    "VIEWER_ROLE",
    "Account",
    "AccountCreateInput",
    "AccountService",
    "AccountError",
    "AccountAlreadyExistsError",
]
