"""Token issuing endpoint."""
from fastapi import APIRouter, Depends, HTTPException, status

from cashcards.core.security import create_access_token
from cashcards.interfaces.http.deps import get_account_service
from cashcards.modules.accounts import AccountService
from cashcards.schemas import LoginRequest, Token

router = APIRouter()


@router.post("/token", response_model=Token, summary="Exchange credentials for a bearer token")
async def issue_token(
    payload: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
) -> Token:
    account = await account_service.authenticate(payload.username, payload.password)
    if not account:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    access_token = create_access_token(account.id, account.username, account.role)
    return Token(access_token=access_token)
