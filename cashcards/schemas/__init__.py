"""Pydantic schemas used across the project."""
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# amounts travel as JSON numbers; Decimal stays the in-process type
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    account_id: str
    username: str
    role: str


class CashCardRequest(BaseModel):
    """Body of create and update requests.

    ``id`` and ``owner`` are accepted so clients may send a whole card back,
    but both are ignored: ids come from the store and owners from the
    authenticated caller.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    amount: Optional[Decimal] = None
    owner: Optional[str] = None


class CashCardResponse(BaseModel):
    id: int
    amount: Amount

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
