"""User persistence: lookup, creation and password checks."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from evcharge.core.errors import ConstraintViolation
from evcharge.core.security import hash_password, verify_password
from evcharge.models.user import User
from evcharge.schemas.auth import PublicUser

logger = logging.getLogger(__name__)


async def find_user_by_email(session: AsyncSession, email: str) -> User | None:
    """Get a user, including the password hash, by login email."""
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def find_user_by_id(session: AsyncSession, user_id: int) -> PublicUser | None:
    """Get the public view of a user by id."""
    result = await session.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        return None
    return PublicUser.model_validate(user)


async def create_user(
    session: AsyncSession,
    username: str,
    email: str,
    password: str,
) -> PublicUser:
    """
    Create a user with a hashed password.

    Raises:
        ConstraintViolation: username or email already taken
    """
    user = User(
        username=username,
        email=email,
        password=hash_password(password),
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        logger.info("Rejected duplicate user %s", email)
        raise ConstraintViolation() from e

    await session.refresh(user)
    return PublicUser.model_validate(user)


def validate_password(user: User, password: str) -> bool:
    return verify_password(password, user.password)
