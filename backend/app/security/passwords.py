"""
Password hashing helpers using passlib.

Provides two functions used by account creation and login:
- hash_password(plain: str) -> str
- verify_password(plain: str, hashed: str) -> bool

Uses bcrypt via passlib's CryptContext with the cost factor from
`settings.bcrypt_rounds` (default 10). Each hash embeds its own salt, so the
same password hashes differently every time.
"""
from __future__ import annotations

import logging
from typing import Optional

from passlib.context import CryptContext

from app.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(plain: str) -> str:
    """Hash a plaintext password and return the encoded hash string."""
    if plain is None:
        raise ValueError("Password must not be None")
    return pwd_context.hash(plain)


def verify_password(plain: Optional[str], hashed: Optional[str]) -> bool:
    """Verify a plaintext password against a stored hash.

    Returns True if the password matches, False otherwise. A malformed or
    unrecognised hash counts as a mismatch.
    """
    if plain is None or hashed is None:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError) as exc:
        logger.warning("Password verification against unusable hash: %s", exc)
        return False
