"""Account registration service."""

import logging
from typing import Any, Dict

from fastapi import HTTPException, status
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from todo_api.repositories.user import UserRepository
from todo_api.services.passwords import hash_password

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Database):
        self.db = db
        self.user_repo = UserRepository(db)

    def register(self, username: Any, password: Any) -> Dict[str, Any]:
        """
        Create an account for ``username``.

        Raises:
            HTTPException(400): missing field or username already taken
        """
        if not username or not password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username and password are required",
            )

        if self.user_repo.find_by_username(username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists"
            )

        try:
            user = self.user_repo.create_user(username, hash_password(str(password)))
        except DuplicateKeyError:
            # Lost a race with a concurrent registration; the unique index caught it
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists"
            )

        logger.info("Registered user %s", user.username)
        return {"message": "User registered successfully", "user": {"username": user.username}}
