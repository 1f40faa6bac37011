# backend/tests/test_client_credentials.py
import pytest

from evcharge.client.credentials import (
    CredentialStore,
    NotAuthenticated,
    StoredUser,
    require_authentication,
)


@pytest.fixture
def store(tmp_path):
    return CredentialStore(tmp_path / "nested" / "user.json")


def test_empty_store_is_not_authenticated(store):
    assert store.load() is None
    assert store.token is None
    assert store.is_authenticated() is False
    assert store.auth_header() == {}


def test_save_and_load_round_trip(store):
    user = StoredUser(id=3, username="driver", email="driver@example.com", token="abc")
    store.save(user)

    assert store.load() == user
    assert store.is_authenticated()
    assert store.auth_header() == {"Authorization": "Bearer abc"}


def test_clear_logs_out(store):
    store.save(StoredUser(id=3, username="driver", email="driver@example.com", token="abc"))
    store.clear()
    store.clear()
    assert store.load() is None


def test_corrupt_file_is_ignored(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load() is None
    assert not store.is_authenticated()


def test_route_guard_redirects_to_login(store):
    with pytest.raises(NotAuthenticated) as exc_info:
        require_authentication(store)
    assert exc_info.value.redirect_to == "/login"


def test_route_guard_passes_with_token(store):
    user = StoredUser(id=1, username="admin", email="admin@example.com", token="t")
    store.save(user)
    assert require_authentication(store) == user
