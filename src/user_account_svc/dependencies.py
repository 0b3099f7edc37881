import logging
from typing import Iterator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from user_account_svc.exceptions import ForbiddenError, TokenError
from user_account_svc.repositories.user_store import UserStore
from user_account_svc.services.account_service import AccountService

# auto_error=False so a missing header reaches require_subject and gets the
# same 403 body as an invalid token.
bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Iterator[Session]:
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def get_account_service(request: Request, db: Session = Depends(get_db)) -> AccountService:
    state = request.app.state
    return AccountService(UserStore(db), state.password_hasher, state.token_service)


async def require_subject(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Authentication gate for protected routes.

    Returns the user id carried by the bearer token. A missing, malformed,
    tampered or expired token all raise ForbiddenError.
    """
    if credentials is None:
        raise ForbiddenError()

    try:
        return request.app.state.token_service.verify(credentials.credentials)
    except TokenError as e:
        logging.info("Rejected bearer token: %s", type(e).__name__)
        raise ForbiddenError() from e


def authorize_target(request: Request, subject: str, user_id: int) -> None:
    """
    Apply the target authorization policy.

    With ``enforce_subject_match`` off (the default) any authenticated user
    may act on any account.
    """
    if request.app.state.settings.enforce_subject_match and subject != str(user_id):
        raise ForbiddenError()
