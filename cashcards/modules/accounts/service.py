"""Domain services for account management."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from cashcards.core.crypto import hash_password, verify_password

from .exceptions import AccountAlreadyExistsError
from .models import Account, AccountCreateInput
from .repository import AccountRepository


class AccountService:
    """Encapsulates core account use cases.

    This is the identity-verification collaborator of the card API: it turns
    credentials into an :class:`Account` whose ``identity`` is the only thing
    the card service ever sees.
    """

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        from cashcards.infrastructure.database.repositories import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: str) -> Account | None:
        return await self._repository.get_by_id(account_id)

    async def get_by_username(self, username: str) -> Account | None:
        return await self._repository.get_by_username(username)

    async def authenticate(self, username: str, password: str) -> Account | None:
        account = await self._repository.get_by_username(username)
        if account is None or not account.is_active:
            return None
        if not verify_password(password, account.password_hash):
            return None
        return account

    async def create_account(self, payload: AccountCreateInput) -> Account:
        existing = await self._repository.get_by_username(payload.username)
        if existing is not None:
            raise AccountAlreadyExistsError(f"username already taken: {payload.username}")

        return await self._repository.create_account(
            username=payload.username,
            password_hash=hash_password(payload.password),
            role=payload.role,
            is_active=payload.is_active,
        )
