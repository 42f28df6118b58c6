"""Password hashing and session tokens."""

import logging
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError
from passlib.context import CryptContext
from passlib.exc import MalformedHashError, PasswordValueError, UnknownHashError

from flowboard.errors import (
    BadSignature,
    MalformedToken,
    TokenExpired,
    UnexpectedAlgorithm,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=24)
REQUIRED_CLAIMS = ("sub", "iat", "exp")
# user ids are 32-bit integer primary keys
MAX_SUBJECT_ID = 2**31 - 1


class PasswordHasher:
    """bcrypt hashing with a configurable work factor."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password.

        Passwords bcrypt cannot accept (e.g. containing NUL) raise
        ``ValidationError``; any other hashing failure propagates.
        """
        try:
            return self._context.hash(password)
        except PasswordValueError as e:
            raise ValidationError("Password contains unsupported characters") from e

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash. Unrecognized hashes never match."""
        try:
            return self._context.verify(password, password_hash)
        except (UnknownHashError, MalformedHashError):
            logger.warning("Stored password hash could not be parsed")
            return False


class TokenService:
    """Issues and verifies signed, time-bounded session tokens.

    Tokens are JWTs carrying ``sub`` (the user id as a string), ``iat`` and
    ``exp``. Nothing is stored server side: a token is valid for as long as
    its signature checks out and ``exp`` has not passed.
    """

    def __init__(self, secret: str, ttl: timedelta = DEFAULT_TOKEN_TTL, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        if not algorithm.startswith("HS"):
            raise ValueError(f"Unsupported signing algorithm: {algorithm}")
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, subject_id: int, now: datetime | None = None) -> str:
        """Create a token asserting ``subject_id``."""
        issued_at = now or datetime.now(UTC)
        claims = {
            "sub": str(subject_id),
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """Verify a token and return its subject id.

        Raises:
            MalformedToken: not a JWT, a required claim is missing, or the
                subject is not a valid user id.
            UnexpectedAlgorithm: header ``alg`` is not the configured algorithm.
            BadSignature: signature does not match this service's secret.
            TokenExpired: ``exp`` is in the past.
        """
        try:
            header = jwt.get_unverified_header(token)
            unverified = jwt.get_unverified_claims(token)
        except JWTError as e:
            raise MalformedToken() from e

        if header.get("alg") != self.algorithm:
            raise UnexpectedAlgorithm()

        # a token without exp would never expire
        if any(claim not in unverified for claim in REQUIRED_CLAIMS):
            raise MalformedToken()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_iat": True, "require_sub": True},
            )
        except ExpiredSignatureError as e:
            raise TokenExpired() from e
        except JWTClaimsError as e:
            raise MalformedToken() from e
        except JWTError as e:
            raise BadSignature() from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not (subject.isascii() and subject.isdigit()):
            raise MalformedToken()
        # length check first: int() refuses very long digit strings
        if len(subject) > len(str(MAX_SUBJECT_ID)) or not 1 <= int(subject) <= MAX_SUBJECT_ID:
            raise MalformedToken()
        return int(subject)
