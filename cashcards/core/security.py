"""Caller authentication for the card API.

Requests authenticate with HTTP Basic credentials or with a bearer JWT
issued by ``POST /auth/token``. Missing or bad credentials yield 401; an
authenticated account that may not use the card API at all yields 403.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBasic,
    HTTPBasicCredentials,
    HTTPBearer,
)
from jose import JWTError, jwt

from cashcards.core.config import get_settings
from cashcards.interfaces.http.deps.account import get_account_service
from cashcards.modules.accounts import Account, AccountService
from cashcards.modules.cards.policy import may_use_cards
from cashcards.schemas import TokenData

logger = logging.getLogger(__name__)
settings = get_settings()
basic_security = HTTPBasic(realm=settings.security.basic_realm, auto_error=False)
bearer_security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": f'Basic realm="{settings.security.basic_realm}"'},
    )


def create_access_token(account_id: str, username: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": account_id,
        "username": username,
        "role": role,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise _unauthorized("Could not validate credentials") from exc

    account_id = payload.get("sub")
    username = payload.get("username")
    role = payload.get("role")
    if not all([account_id, username, role]):
        raise _unauthorized("Could not validate credentials")
    return TokenData(account_id=account_id, username=username, role=role)


async def get_current_account(
    basic: Optional[HTTPBasicCredentials] = Depends(basic_security),
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(bearer_security),
    account_service: AccountService = Depends(get_account_service),
) -> Account:
    if basic is not None:
        account = await account_service.authenticate(basic.username, basic.password)
        if account is None:
            logger.info("Rejected basic credentials for %s", basic.username)
            raise _unauthorized("Invalid credentials")
        return account

    if bearer is not None:
        token_data = decode_access_token(bearer.credentials)
        account = await account_service.get_by_id(token_data.account_id)
        if account is None or not account.is_active:
            raise _unauthorized("Account does not exist or is disabled")
        return account

    raise _unauthorized()


async def get_current_card_owner(account: Account = Depends(get_current_account)) -> Account:
    if not may_use_cards(account):
        logger.info("Account %s is not permitted to use cash cards", account.username)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not permitted to access cash cards")
    return account
