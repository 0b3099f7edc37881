from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from jose import ExpiredSignatureError, JWTError, jwt

from user_account_svc.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MalformedTokenError,
)

REQUIRED_CLAIMS = ("iat", "exp")


class TokenService:
    """
    Issues and verifies signed, time-limited bearer tokens (JWT).

    The token carries the user id as ``sub`` together with ``iat`` and ``exp``.
    Tokens are not stored anywhere; a token stays valid until it expires.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_minutes: int = 60):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires = timedelta(minutes=expires_minutes)

    def issue(self, subject_id: Union[int, str], now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(subject_id),
            "iat": issued_at,
            "exp": issued_at + self._expires,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Check the token signature and expiry and return its subject id.

        Raises MalformedTokenError if the token is not a parseable JWT or lacks
        a string subject or its iat/exp claims, ExpiredTokenError if it has
        expired and InvalidTokenError for any other verification failure.
        """
        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError as e:
            raise MalformedTokenError(str(e)) from e

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise MalformedTokenError("Token has no subject")
        for claim in REQUIRED_CLAIMS:
            if claim not in claims:
                raise MalformedTokenError(f"Token has no {claim} claim")

        try:
            jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_sub": True, "require_iat": True, "require_exp": True},
            )
        except ExpiredSignatureError as e:
            raise ExpiredTokenError(str(e)) from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        return subject
