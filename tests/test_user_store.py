from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from user_account_svc.exceptions import StoreError, StoreUnavailableError
from user_account_svc.models.base import Base, create_session_factory, create_store_engine
from user_account_svc.repositories.user_store import UserStore


@pytest.fixture
def session():
    engine = create_store_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store(session):
    return UserStore(session)


def test_create_assigns_id(store):
    user = store.create("a@b.com", "alice", "hash")
    assert user.id is not None
    assert store.find_by_login("alice").id == user.id


def test_find_by_unknown_login(store):
    assert store.find_by_login("nobody") is None


def test_login_is_not_unique(store):
    first = store.create("a@b.com", "alice", "hash1")
    store.create("c@d.com", "alice", "hash2")
    # The first match wins when logins collide.
    assert store.find_by_login("alice").id == first.id


def test_update_only_touches_email_and_login(store):
    user = store.create("a@b.com", "alice", "hash")
    updated = store.update_by_id(user.id, {"email": "x@y.com", "hashed_password": "other"})
    assert updated.email == "x@y.com"
    assert updated.login == "alice"
    assert updated.hashed_password == "hash"


def test_update_missing_id(store):
    assert store.update_by_id(123, {"email": "x@y.com"}) is None


def test_delete_returns_removed_record(store):
    user = store.create("a@b.com", "alice", "hash")
    deleted = store.delete_by_id(user.id)
    assert deleted.login == "alice"
    assert store.delete_by_id(user.id) is None
    assert store.find_by_login("alice") is None


def test_database_failure_is_wrapped():
    session = MagicMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    store = UserStore(session)

    with pytest.raises(StoreUnavailableError) as exc_info:
        store.find_by_login("alice")
    assert isinstance(exc_info.value, StoreError)
    assert exc_info.value.error == "OperationalError"
    session.rollback.assert_called_once()
