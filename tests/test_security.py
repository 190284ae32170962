"""Tests for password hashing and bearer tokens."""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.errors import InvalidToken, Unauthenticated, ValidationError
from app.core.security import PasswordHasher, TokenService, TokenSubject

SECRET = "unit-test-signing-secret-0123456789abcdef"


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService(SECRET)


def test_hash_is_salted(hasher):
    """Same password hashes differently each time but both verify."""
    first = hasher.hash("hunter2")
    second = hasher.hash("hunter2")
    assert first != second
    assert "hunter2" not in first
    assert hasher.verify("hunter2", first)
    assert hasher.verify("hunter2", second)


def test_verify_wrong_password_returns_false(hasher):
    digest = hasher.hash("correct horse")
    assert hasher.verify("battery staple", digest) is False


def test_verify_garbage_digest_returns_false(hasher):
    assert hasher.verify("anything", "not-a-bcrypt-digest") is False
    assert hasher.verify("anything", None) is False
    assert hasher.verify("", hasher.hash("x")) is False


def test_hash_requires_password(hasher):
    with pytest.raises(ValidationError):
        hasher.hash("")
    with pytest.raises(ValidationError):
        hasher.hash(None)


def test_issue_then_verify_returns_claims(tokens):
    subject = TokenSubject(id=7, firstname="Malee", lastname="Suksan")
    claims = tokens.verify(tokens.issue(subject))
    assert claims.id == 7
    assert claims.firstname == "Malee"
    assert claims.lastname == "Suksan"
    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_expired_token_is_rejected(tokens):
    subject = TokenSubject(id=1, firstname="Old", lastname="Token")
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    token = tokens.issue(subject, issued_at=two_hours_ago)
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_token_signed_with_other_key_is_rejected(tokens):
    subject = TokenSubject(id=1, firstname="A", lastname="B")
    forged = TokenService("a-completely-different-secret-0123456789").issue(subject)
    with pytest.raises(InvalidToken):
        tokens.verify(forged)


def test_tampered_token_is_rejected(tokens):
    token = tokens.issue(TokenSubject(id=1, firstname="A", lastname="B"))
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(InvalidToken):
        tokens.verify(tampered)


def test_token_without_id_claim_is_rejected(tokens):
    now = datetime.now(timezone.utc)
    token = jwt.encode({"firstname": "X", "iat": now, "exp": now + timedelta(minutes=5)}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidToken):
        tokens.verify(token)


@pytest.mark.parametrize("missing", [None, ""])
def test_missing_token_is_unauthenticated(tokens, missing):
    with pytest.raises(Unauthenticated):
        tokens.verify(missing)


def test_not_a_jwt_is_invalid(tokens):
    with pytest.raises(InvalidToken):
        tokens.verify("definitely.not.ajwt")


def test_secret_is_required():
    with pytest.raises(ValueError):
        TokenService("")


def test_long_password_is_cut_to_72_bytes(hasher):
    """Passwords past bcrypt's 72-byte limit hash instead of erroring."""
    long_password = "x" * 80
    digest = hasher.hash(long_password)
    assert hasher.verify(long_password, digest)
    # Only the first 72 bytes count
    assert hasher.verify("x" * 72 + "different", digest)
    assert not hasher.verify("x" * 71, digest)


def test_long_multibyte_password(hasher):
    password = "รหัสผ่าน" * 10
    digest = hasher.hash(password)
    assert hasher.verify(password, digest)
