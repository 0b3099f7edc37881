"""
Exceptions raised by the account service and its collaborators.

Each AccountError subclass maps to one HTTP status in ``errors.py``.
Token errors are never sent to the client as-is; the authentication gate
turns every one of them into ForbiddenError.
"""

from typing import Optional


class AccountError(Exception):
    """Base class for account service errors."""

    message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCredentialsError(AccountError):
    # Same message whether the login is unknown or the password is wrong.
    message = "Invalid login or password"


class ForbiddenError(AccountError):
    message = "Forbidden"


class UserNotFoundError(AccountError):
    message = "User not found"


class StoreError(AccountError):
    """Persistence layer failure."""

    message = "User store error"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None):
        super().__init__(message)
        self.error = error or type(self).__name__


class StoreUnavailableError(StoreError):
    message = "User store unavailable"


class MalformedHashError(AccountError):
    """A stored password hash could not be parsed."""

    message = "Something went wrong"


class TokenError(Exception):
    """Base class for bearer token failures."""


class InvalidTokenError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass


class MalformedTokenError(TokenError):
    pass
