# backend/evcharge/core/security.py
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import jwt, JWTError

from evcharge.core.config import Settings, settings
from evcharge.core.errors import MissingCredential, InvalidCredential

BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with a per-hash bcrypt salt."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    user_id: int,
    config: Settings | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed token for ``user_id`` valid for the configured lifetime."""
    config = config or settings
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=config.access_token_expire_days)
    )
    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, config.secret_key, algorithm=config.jwt_algorithm)


def decode_access_token(token: str, config: Settings | None = None) -> dict | None:
    config = config or settings
    try:
        return jwt.decode(token, config.secret_key, algorithms=[config.jwt_algorithm])
    except JWTError:
        return None


def authenticate(token: str | None, config: Settings | None = None) -> int:
    """
    Verify a bearer token and return the user id it was issued for.

    Raises:
        MissingCredential: no token supplied
        InvalidCredential: bad signature, malformed, expired or foreign subject
    """
    if not token:
        raise MissingCredential()

    payload = decode_access_token(token, config)
    if payload is None:
        raise InvalidCredential()

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise InvalidCredential()
