from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional
import hashlib
import hmac
import secrets

import jwt

from .models import User

ALGORITHM = "HS512"
ACCESS_TOKEN_EXPIRE_MINUTES = 60

# Matches the default key size of an HMAC-SHA512 instance (one block)
SALT_BYTES = 128

NAME_IDENTIFIER_CLAIM = "nameidentifier"
NAME_CLAIM = "name"


class ConfigurationError(RuntimeError):
    """Raised when the service is missing configuration it cannot run without."""


class PasswordHash(NamedTuple):
    hash: bytes
    salt: bytes


def _compute_hash(password: str, salt: bytes) -> bytes:
    return hmac.new(salt, password.encode("utf-8"), hashlib.sha512).digest()


def create_password_hash(password: str) -> PasswordHash:
    """Hash a password with HMAC-SHA512 keyed by a freshly generated salt."""
    salt = secrets.token_bytes(SALT_BYTES)
    return PasswordHash(hash=_compute_hash(password, salt), salt=salt)


def verify_password_hash(password: str, password_hash: bytes, password_salt: bytes) -> bool:
    return hmac.compare_digest(_compute_hash(password, password_salt), password_hash)


class TokenIssuer:
    """
    Issues signed access tokens carrying a user's id and username.

    Args:
        secret: Signing secret (AppSettings:Token). Required.
        expire_minutes: Token lifetime in minutes

    Raises:
        ConfigurationError: If the secret is missing or empty
    """

    def __init__(self, secret: Optional[str], expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES):
        if not secret:
            raise ConfigurationError("AppSettings Token is not configured (APP_SETTINGS_TOKEN)")
        self._key = secret.encode("utf-8")
        self.expire_minutes = expire_minutes

    def create_token(self, user: User) -> str:
        """Sign a token for the user. Only the id and username attributes are read."""
        now = datetime.now(timezone.utc)
        payload = {
            NAME_IDENTIFIER_CLAIM: str(user.id),
            NAME_CLAIM: user.username,
            "nbf": now,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self._key, algorithm=ALGORITHM)

    def decode_token(self, token: str) -> dict:
        """
        Verify signature and expiry and return the token claims.

        Raises:
            jwt.InvalidTokenError: If the token is malformed, tampered with or expired
        """
        return jwt.decode(
            token,
            self._key,
            algorithms=[ALGORITHM],
            options={"require": ["exp", NAME_IDENTIFIER_CLAIM, NAME_CLAIM]},
        )
