from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from user_account_svc.exceptions import ExpiredTokenError, InvalidTokenError, MalformedTokenError
from user_account_svc.security.tokens import TokenService

SECRET = "unit-test-secret"


@pytest.fixture
def tokens():
    return TokenService(SECRET)


def test_issue_then_verify_returns_subject(tokens):
    token = tokens.issue(42)
    assert tokens.verify(token) == "42"


def test_token_expires_after_one_hour(tokens):
    issued_at = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    token = tokens.issue(1, now=issued_at)

    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == 3600


def test_expired_token(tokens):
    token = tokens.issue(1, now=datetime.now(timezone.utc) - timedelta(hours=1, seconds=5))
    with pytest.raises(ExpiredTokenError):
        tokens.verify(token)


def test_token_from_other_secret_is_invalid(tokens):
    token = TokenService("another-secret").issue(1)
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_tampered_payload_is_invalid(tokens):
    header, _, signature = tokens.issue(1).split(".")
    other_payload = tokens.issue(2).split(".")[1]
    with pytest.raises(InvalidTokenError):
        tokens.verify(".".join([header, other_payload, signature]))


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token(tokens, token):
    with pytest.raises(MalformedTokenError):
        tokens.verify(token)


def test_token_without_subject_is_malformed(tokens):
    exp = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedTokenError):
        tokens.verify(token)


def test_token_with_non_string_subject_is_malformed(tokens):
    exp = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"sub": 42, "iat": datetime.now(timezone.utc), "exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedTokenError):
        tokens.verify(token)


def test_token_without_expiry_is_rejected(tokens):
    # A signed token with no exp claim must never be accepted.
    token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedTokenError):
        tokens.verify(token)


def test_token_without_issued_at_is_rejected(tokens):
    exp = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"sub": "1", "exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedTokenError):
        tokens.verify(token)


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        TokenService("")
