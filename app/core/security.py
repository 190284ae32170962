# app/core/security.py
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from app.core.errors import InvalidToken, Unauthenticated, ValidationError

logger = logging.getLogger(__name__)


# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """bcrypt digests with a configurable cost factor.

    Longer passwords are cut to 72 bytes before hashing and checking, so
    they behave the same on bcrypt releases that refuse them outright.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        if not password:
            raise ValidationError("Password is required")
        return bcrypt.hashpw(password.encode()[:BCRYPT_MAX_BYTES], bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, digest: str) -> bool:
        if not password or not digest:
            return False
        try:
            return bcrypt.checkpw(password.encode()[:BCRYPT_MAX_BYTES], digest.encode())
        except ValueError:
            # Stored value is not a bcrypt digest
            logger.warning("Stored password is not a valid bcrypt digest")
            return False


@dataclass(frozen=True)
class TokenSubject:
    id: int
    firstname: Optional[str]
    lastname: Optional[str]
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class TokenService:
    """Signs and checks the bearer tokens handed out at login.

    The secret is fixed for the life of the instance; there is no refresh
    or revocation, a token simply stops verifying once `exp` has passed.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: timedelta = timedelta(hours=1)):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, subject, issued_at: datetime = None) -> str:
        issued_at = issued_at or datetime.now(timezone.utc)
        payload = {
            "id": subject.id,
            "firstname": subject.firstname,
            "lastname": subject.lastname,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> TokenSubject:
        if not token:
            raise Unauthenticated("No token provided")
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as exc:
            logger.info("Rejected token: %s", exc)
            raise InvalidToken("Invalid or expired token") from exc

        if claims.get("id") is None:
            raise InvalidToken("Invalid or expired token")

        return TokenSubject(
            id=claims["id"],
            firstname=claims.get("firstname"),
            lastname=claims.get("lastname"),
            issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )
