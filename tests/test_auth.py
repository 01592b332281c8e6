"""Authentication in front of the card API."""

from datetime import timedelta

import pytest

from cashcards.core.security import create_access_token
from cashcards.modules.accounts import AccountAlreadyExistsError, AccountCreateInput, AccountService
from tests.conftest import SARAH


async def test_missing_credentials_are_401(client):
    res = await client.get("/cashcards/99")

    assert res.status_code == 401
    assert res.headers["www-authenticate"].startswith("Basic")


async def test_bad_credentials_are_401(client):
    assert (await client.get("/cashcards/1000", auth=("Bad-user", "abc123"))).status_code == 401
    assert (await client.get("/cashcards/1000", auth=("sarah1", "wrongPassword"))).status_code == 401


async def test_token_grants_bearer_access(client):
    res = await client.post("/auth/token", json={"username": SARAH[0], "password": SARAH[1]})
    assert res.status_code == 200
    token = res.json()
    assert token["token_type"] == "bearer"

    card = await client.get("/cashcards/99", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert card.status_code == 200
    assert card.json()["id"] == 99


async def test_token_with_wrong_password_is_401(client):
    res = await client.post("/auth/token", json={"username": "sarah1", "password": "nope"})
    assert res.status_code == 401


async def test_garbage_and_expired_tokens_are_401(client, test_db):
    assert (await client.get("/cashcards/99", headers={"Authorization": "Bearer not-a-jwt"})).status_code == 401

    sarah = await AccountService.with_session(test_db).get_by_username("sarah1")
    expired = create_access_token(sarah.id, sarah.username, sarah.role, expires_delta=timedelta(minutes=-5))
    res = await client.get("/cashcards/99", headers={"Authorization": f"Bearer {expired}"})
    assert res.status_code == 401


async def test_inactive_account_cannot_authenticate(client, test_session_factory):
    async with test_session_factory() as session:
        await AccountService.with_session(session).create_account(
            AccountCreateInput(username="gone", password="pw1234", is_active=False)
        )
        await session.commit()

    assert (await client.get("/cashcards", auth=("gone", "pw1234"))).status_code == 401


async def test_health_needs_no_credentials(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


async def test_duplicate_username_is_rejected(test_db):
    with pytest.raises(AccountAlreadyExistsError):
        await AccountService.with_session(test_db).create_account(
            AccountCreateInput(username="sarah1", password="another")
        )
