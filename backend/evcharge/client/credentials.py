"""Locally stored login, the client's equivalent of browser local storage."""
import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CREDENTIALS_PATH = Path.home() / ".evcharge" / "user.json"
LOGIN_ROUTE = "/login"


class StoredUser(BaseModel):
    id: int
    username: str
    email: str
    token: str


class NotAuthenticated(Exception):
    """Raised by the route guard when no token is stored."""

    def __init__(self, redirect_to: str = LOGIN_ROUTE):
        self.redirect_to = redirect_to
        super().__init__(f"Authentication required, redirect to {redirect_to}")


class CredentialStore:
    """JSON file holding the logged-in user and their token."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else DEFAULT_CREDENTIALS_PATH

    def load(self) -> StoredUser | None:
        if not self.path.exists():
            return None
        try:
            return StoredUser.model_validate(json.loads(self.path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable credentials file {self.path}: {e}")
            return None

    def save(self, user: StoredUser) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(user.model_dump_json(), encoding="utf-8")

    def clear(self) -> None:
        """Log out."""
        self.path.unlink(missing_ok=True)

    @property
    def token(self) -> str | None:
        user = self.load()
        return user.token if user else None

    def is_authenticated(self) -> bool:
        # Presence only; expiry is enforced by the server
        return bool(self.token)

    def auth_header(self) -> dict[str, str]:
        token = self.token
        return {"Authorization": f"Bearer {token}"} if token else {}


def require_authentication(store: CredentialStore) -> StoredUser:
    """
    Guard for pages that need a login.

    Returns:
        The stored user

    Raises:
        NotAuthenticated: nothing stored; callers should send the user to /login
    """
    user = store.load()
    if user is None or not user.token:
        raise NotAuthenticated()
    return user
