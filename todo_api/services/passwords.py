"""Password hashing with bcrypt."""
from __future__ import annotations

import base64
import hashlib

import bcrypt

from todo_api.config import settings


def prehash_password(password: str) -> bytes:
    """SHA-256 then base64, so any length fits bcrypt's 72-byte input without NUL bytes."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.PASSWORD_BCRYPT_ROUNDS)
    return bcrypt.hashpw(prehash_password(password), salt).decode("utf-8")
