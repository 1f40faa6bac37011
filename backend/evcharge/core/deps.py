# backend/evcharge/core/deps.py
import logging

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from evcharge.core.config import Settings, get_settings
from evcharge.core.errors import AuthError
from evcharge.core.security import authenticate

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Token from ``Authorization: Bearer <token>``, or None."""
    if credentials is None:
        return None
    return credentials.credentials


async def require_user_id(
    token: str | None = Depends(get_bearer_token),
    config: Settings = Depends(get_settings),
) -> int:
    """Id of the authenticated user. Any auth failure becomes a generic 401."""
    try:
        return authenticate(token, config)
    except AuthError as e:
        logger.info(f"Rejected request: {type(e).__name__}")
        raise
