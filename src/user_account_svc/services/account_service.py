"""
Account use cases: register, login, update and delete.

Blocking work (bcrypt and database calls) is pushed to the threadpool so a
request waiting on it never holds up other requests.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from user_account_svc.exceptions import InvalidCredentialsError, UserNotFoundError
from user_account_svc.models.user import User
from user_account_svc.repositories.user_store import UserStore
from user_account_svc.security.passwords import PasswordHasher
from user_account_svc.security.tokens import TokenService


@dataclass
class Registered:
    user: User


@dataclass
class TokenIssued:
    token: str


@dataclass
class Updated:
    user: User


@dataclass
class Deleted:
    user_id: int


class AccountService:
    """Orchestrates the user store, password hasher and token service."""

    def __init__(self, store: UserStore, hasher: PasswordHasher, tokens: TokenService):
        self._store = store
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, email: str, login: str, password: str) -> Registered:
        hashed = await run_in_threadpool(self._hasher.hash, password)
        user = await run_in_threadpool(self._store.create, email, login, hashed)
        return Registered(user=user)

    async def login(self, login: str, password: str) -> TokenIssued:
        """
        Authenticate by login and password and issue a bearer token.

        Raises InvalidCredentialsError for an unknown login and for a wrong
        password alike.
        """
        user = await run_in_threadpool(self._store.find_by_login, login)
        if user is None:
            raise InvalidCredentialsError()

        matches = await run_in_threadpool(self._hasher.verify, password, user.hashed_password)
        if not matches:
            raise InvalidCredentialsError()

        return TokenIssued(token=self._tokens.issue(user.id))

    async def update(self, user_id: int, email: Optional[str] = None, login: Optional[str] = None) -> Updated:
        changes = {}
        if email is not None:
            changes["email"] = email
        if login is not None:
            changes["login"] = login

        user = await run_in_threadpool(self._store.update_by_id, user_id, changes)
        if user is None:
            raise UserNotFoundError()
        return Updated(user=user)

    async def delete(self, user_id: int) -> Deleted:
        user = await run_in_threadpool(self._store.delete_by_id, user_id)
        if user is None:
            raise UserNotFoundError()
        return Deleted(user_id=user_id)
