import logging

from passlib.context import CryptContext

from user_account_svc.exceptions import MalformedHashError


class PasswordHasher:
    """
    Salted bcrypt hashing backed by a passlib CryptContext.
    """

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against its stored hash.

        Returns False on mismatch. Raises MalformedHashError when the stored
        value is not a recognisable bcrypt hash.
        """
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logging.error("Stored password hash could not be verified: %s", e)
            raise MalformedHashError() from e
