# backend/tests/test_users_service.py
import pytest
from sqlalchemy import select, func

from evcharge.core.errors import ConstraintViolation
from evcharge.models.user import User
from evcharge.schemas.auth import PublicUser
from evcharge.services import users


@pytest.mark.asyncio
async def test_create_user_hashes_password(session):
    user = await users.create_user(session, "alice", "alice@example.com", "wonderland")

    assert isinstance(user, PublicUser)
    assert user.username == "alice"
    assert user.created_at is not None

    stored = await users.find_user_by_email(session, "alice@example.com")
    assert stored.password != "wonderland"
    assert users.validate_password(stored, "wonderland") is True
    assert users.validate_password(stored, "looking-glass") is False


@pytest.mark.asyncio
async def test_find_user_by_id_excludes_password(session):
    created = await users.create_user(session, "bob", "bob@example.com", "builder")

    found = await users.find_user_by_id(session, created.id)

    assert found == created
    assert "password" not in found.model_dump()


@pytest.mark.asyncio
async def test_find_missing_user(session):
    assert await users.find_user_by_email(session, "nobody@example.com") is None
    assert await users.find_user_by_id(session, 999) is None


@pytest.mark.asyncio
async def test_duplicate_email_raises_constraint_violation(session):
    await users.create_user(session, "carol", "carol@example.com", "pw")

    with pytest.raises(ConstraintViolation):
        await users.create_user(session, "carol2", "carol@example.com", "pw")

    count = await session.execute(select(func.count()).select_from(User))
    assert count.scalar_one() == 1


@pytest.mark.asyncio
async def test_duplicate_username_raises_constraint_violation(session):
    await users.create_user(session, "dave", "dave@example.com", "pw")

    with pytest.raises(ConstraintViolation):
        await users.create_user(session, "dave", "other@example.com", "pw")
