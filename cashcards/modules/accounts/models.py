"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

CARD_OWNER_ROLE = "card-owner"
VIEWER_ROLE = "viewer"


@dataclass(slots=True)
class Account:
    id: str
    username: str
    role: str
    is_active: bool
    password_hash: str = field(repr=False)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_card_owner(self) -> bool:
        return self.role == CARD_OWNER_ROLE

    @property
    def identity(self) -> str:
        """Caller identity string handed to the card service."""
        return self.username


@dataclass(slots=True)
class AccountCreateInput:
    username: str
    password: str
    role: str = CARD_OWNER_ROLE
    is_active: bool = True
