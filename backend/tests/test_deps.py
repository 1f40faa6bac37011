# backend/tests/test_deps.py
from unittest.mock import MagicMock

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from evcharge.core.config import settings
from evcharge.core.deps import get_bearer_token, require_user_id
from evcharge.core.errors import InvalidCredential, MissingCredential
from evcharge.core.security import create_access_token


@pytest.mark.asyncio
async def test_get_bearer_token_returns_token():
    credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="abc.def.ghi")
    assert await get_bearer_token(credentials=credentials) == "abc.def.ghi"


@pytest.mark.asyncio
async def test_get_bearer_token_returns_none_when_missing():
    assert await get_bearer_token(credentials=None) is None


@pytest.mark.asyncio
async def test_require_user_id_with_valid_token():
    token = create_access_token(5, settings)
    assert await require_user_id(token=token, config=settings) == 5


@pytest.mark.asyncio
async def test_require_user_id_raises_missing_credential():
    with pytest.raises(MissingCredential) as exc_info:
        await require_user_id(token=None, config=settings)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid or missing authentication"


@pytest.mark.asyncio
async def test_require_user_id_raises_invalid_credential():
    with pytest.raises(InvalidCredential):
        await require_user_id(token="garbage", config=settings)


@pytest.mark.asyncio
async def test_require_user_id_uses_given_settings():
    config = MagicMock()
    config.secret_key = "another-secret"
    config.jwt_algorithm = "HS256"
    config.access_token_expire_days = 7

    token = create_access_token(9, config)

    assert await require_user_id(token=token, config=config) == 9
    with pytest.raises(InvalidCredential):
        await require_user_id(token=token, config=settings)
