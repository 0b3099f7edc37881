import logging
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_account_svc.exceptions import StoreUnavailableError
from user_account_svc.models.user import User

UPDATABLE_FIELDS = ("email", "login")


class UserStore:
    """
    Persistence of user records over a SQLAlchemy session.

    Every database failure is rolled back and surfaced as
    StoreUnavailableError. Nothing is retried.
    """

    def __init__(self, session: Session):
        self._session = session

    def _fail(self, operation: str, e: SQLAlchemyError) -> StoreUnavailableError:
        self._session.rollback()
        logging.error("User store %s failed: %s", operation, e, exc_info=True)
        return StoreUnavailableError(error=type(e).__name__)

    def create(self, email: str, login: str, hashed_password: str) -> User:
        user = User(email=email, login=login, hashed_password=hashed_password)
        try:
            self._session.add(user)
            self._session.commit()
            self._session.refresh(user)
        except SQLAlchemyError as e:
            raise self._fail("create", e) from e
        return user

    def find_by_login(self, login: str) -> Optional[User]:
        try:
            stmt = select(User).filter(User.login == login)
            result = self._session.execute(stmt)
            return result.scalars().first()
        except SQLAlchemyError as e:
            raise self._fail("lookup", e) from e

    def update_by_id(self, user_id: int, changes: Mapping[str, Any]) -> Optional[User]:
        try:
            user = self._session.get(User, user_id)
            if user is None:
                return None
            for field in UPDATABLE_FIELDS:
                if field in changes:
                    setattr(user, field, changes[field])
            self._session.commit()
            self._session.refresh(user)
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e
        return user

    def delete_by_id(self, user_id: int) -> Optional[User]:
        try:
            user = self._session.get(User, user_id)
            if user is None:
                return None
            self._session.delete(user)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
        return user
