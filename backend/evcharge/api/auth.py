# backend/evcharge/api/auth.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from evcharge.core.config import Settings, get_settings
from evcharge.core.database import get_session
from evcharge.core.errors import ConstraintViolation, InvalidLogin
from evcharge.core.security import create_access_token
from evcharge.schemas.auth import RegisterRequest, LoginRequest, AuthResponse
from evcharge.services import users

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    session: AsyncSession = Depends(get_session),
    config: Settings = Depends(get_settings),
) -> AuthResponse:
    """Create an account and return it with a fresh token."""
    if await users.find_user_by_email(session, data.email):
        raise ConstraintViolation()

    # Duplicate usernames surface as ConstraintViolation from the insert
    user = await users.create_user(session, data.username, data.email, data.password)
    logger.info(f"User registered: {user.username}")

    return AuthResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        token=create_access_token(user.id, config),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    session: AsyncSession = Depends(get_session),
    config: Settings = Depends(get_settings),
) -> AuthResponse:
    """Exchange email and password for a token."""
    user = await users.find_user_by_email(session, data.email)
    if user is None or not users.validate_password(user, data.password):
        logger.info("Failed login attempt")
        raise InvalidLogin()

    return AuthResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        token=create_access_token(user.id, config),
    )
