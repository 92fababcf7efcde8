# File: app/core/security.py

"""
Password hashing and JWT helpers.

Two password schemes are supported:

  - ``hmac-sha256``: HMAC-SHA256 keyed by the plaintext itself, hex encoded.
    Unsalted and deterministic, so credential lookups can compare the hash
    directly in SQL. Every account created before ``bcrypt`` was available
    is stored this way.
  - ``bcrypt``: salted, slow hash. Lookups load the row by email and call
    ``verify_password``.

The signing secret is always passed in by the caller; nothing here reads
settings on its own.
"""

import hashlib
import hmac
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import JWTError, jwt

from app.core.errors import InvalidToken

LEGACY_SCHEME = "hmac-sha256"
BCRYPT_SCHEME = "bcrypt"

# bcrypt rejects longer inputs; the limit applies to every scheme.
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def is_deterministic(scheme: str) -> bool:
    return scheme == LEGACY_SCHEME


def hash_password(password: str, scheme: str = LEGACY_SCHEME) -> str:
    if scheme == LEGACY_SCHEME:
        return hmac.new(password.encode(), digestmod=hashlib.sha256).hexdigest()
    if scheme == BCRYPT_SCHEME:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()
    raise ValueError(f"Unknown password scheme: {scheme}")


def verify_password(password: str, hashed: str, scheme: str = LEGACY_SCHEME) -> bool:
    if scheme == LEGACY_SCHEME:
        return hmac.compare_digest(hash_password(password, LEGACY_SCHEME), hashed)
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except (ValueError, TypeError):
        return False


def generate_jwt(
    user: Any,
    secret: str,
    *,
    algorithm: str = "HS256",
    expire_days: int = 60,
) -> str:
    """
    Sign a token for ``user`` carrying id, username, email and expiry.

    ``username`` is filled from ``user.name``; the entity has no separate
    username column.
    """
    expire = datetime.now(timezone.utc) + timedelta(days=expire_days)
    to_encode: Dict[str, Any] = {
        "id": user.id,
        "username": user.name,
        "email": user.email,
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, *, algorithm: str = "HS256") -> Dict[str, Any]:
    """Return the token claims, raising ``InvalidToken`` on a bad signature or expiry."""
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as exc:
        raise InvalidToken() from exc
