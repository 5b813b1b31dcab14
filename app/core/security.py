"""
Password hashing for stored user credentials.

bcrypt only reads the first 72 bytes of its input, while a password may be up
to 100 characters (up to 400 UTF-8 bytes). Every password is therefore reduced
to a base64-encoded SHA-256 digest (44 ASCII bytes) before bcrypt sees it, so
the whole password takes part in the hash.
"""

import base64
import hashlib

import bcrypt

from app.core.config import settings


def _prehash(plain_password: str) -> bytes:
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prehash(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False
