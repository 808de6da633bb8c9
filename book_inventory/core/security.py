"""Password hashing and JWT session token issue/validation/refresh."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

import bcrypt
import jwt
from pydantic import ValidationError as PydanticValidationError

from book_inventory.core.errors import (
    BadSignatureError,
    ExpiredTokenError,
    InvalidClaimsError,
    MalformedTokenError,
    PasswordMismatchError,
    PasswordTooLongError,
    WeakPasswordError,
    WrongAlgorithmError,
)
from book_inventory.models.user import Role
from book_inventory.schemas.auth import SessionClaims

# Bcrypt cost (log rounds); matches the common library default.
BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 100

REQUIRED_CLAIMS = ["exp", "iat", "nbf", "sub"]


def validate_password_strength(plain_password: str) -> None:
    """Enforce the password length window. No character-class rules."""
    if len(plain_password) < PASSWORD_MIN_LEN:
        raise WeakPasswordError(
            f"password must be at least {PASSWORD_MIN_LEN} characters long"
        )
    if len(plain_password) > PASSWORD_MAX_LEN:
        raise PasswordTooLongError(
            f"password must be at most {PASSWORD_MAX_LEN} characters long"
        )


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if len(plain_password) < PASSWORD_MIN_LEN:
        raise WeakPasswordError(
            f"password must be at least {PASSWORD_MIN_LEN} characters long"
        )
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time compare)."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def check_password(plain_password: str, hashed: str) -> None:
    """Raise PasswordMismatchError unless plain_password matches hashed."""
    if not verify_password(plain_password, hashed):
        raise PasswordMismatchError()


class TokenSubject(Protocol):
    """Anything a token can be issued for (ORM User, CurrentUser, ...)."""

    id: int
    username: str
    email: str
    role: Role


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenManager:
    """
    Issues, validates and refreshes signed, time-bounded session tokens.

    Tokens are HMAC-signed JWTs carrying user_id, username, email and role plus
    the standard iat/nbf/exp/sub claims. There is no revocation: a token stays
    valid until it expires.
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token secret must be non-empty")
        if lifetime <= timedelta(0):
            raise ValueError("token lifetime must be positive")
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm
        self._clock = clock

    def issue(self, user: TokenSubject) -> str:
        """Sign a new token for user's current id, username, email and role."""
        return self._encode(
            user_id=user.id,
            username=user.username,
            email=user.email,
            role=Role(user.role),
        )

    def validate(self, token: str) -> SessionClaims:
        """
        Verify algorithm, signature and expiry; return the embedded claims.

        Raises a TokenError subclass naming the failure reason.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError("token has expired") from e
        except jwt.InvalidAlgorithmError as e:
            raise WrongAlgorithmError("token signing algorithm is not allowed") from e
        except jwt.InvalidSignatureError as e:
            raise BadSignatureError("token signature is invalid") from e
        except (
            jwt.MissingRequiredClaimError,
            jwt.ImmatureSignatureError,
            jwt.InvalidIssuedAtError,
        ) as e:
            raise InvalidClaimsError(f"token claims are invalid: {e}") from e
        except jwt.DecodeError as e:
            raise MalformedTokenError("token is malformed") from e
        except jwt.InvalidTokenError as e:
            raise InvalidClaimsError(f"token claims are invalid: {e}") from e
        return self._claims_from_payload(payload)

    def refresh(self, token: str) -> str:
        """
        Validate token and issue a new one from its claims.

        Does not consult the user store, so a deleted or demoted user's token
        can be refreshed until it expires.
        """
        claims = self.validate(token)
        min_expiry = claims.expires_at + timedelta(seconds=1)
        return self._encode(
            user_id=claims.user_id,
            username=claims.username,
            email=claims.email,
            role=claims.role,
            min_expiry=min_expiry,
        )

    def _encode(
        self,
        user_id: int,
        username: str,
        email: str,
        role: Role,
        min_expiry: datetime | None = None,
    ) -> str:
        now = self._clock()
        expire = now + self.lifetime
        if min_expiry is not None and int(expire.timestamp()) < int(min_expiry.timestamp()):
            expire = min_expiry
        payload: dict[str, Any] = {
            "user_id": user_id,
            "username": username,
            "email": email,
            "role": role.value,
            "sub": username,
            "iat": int(now.timestamp()),
            "nbf": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    @staticmethod
    def _claims_from_payload(payload: dict[str, Any]) -> SessionClaims:
        try:
            return SessionClaims(
                user_id=payload["user_id"],
                username=payload["username"],
                email=payload["email"],
                role=payload["role"],
                subject=payload["sub"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                not_before=datetime.fromtimestamp(payload["nbf"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (KeyError, TypeError, ValueError, PydanticValidationError) as e:
            raise InvalidClaimsError("token claims are invalid") from e
