from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseEntity


class User(BaseEntity):
    """Registered account. ``password`` holds the salted hash, never plaintext."""

    username: str
    password: str
    created_at: Optional[int] = Field(None, alias="createdAt")
