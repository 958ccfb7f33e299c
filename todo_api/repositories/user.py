"""User repository for database operations"""

import time
from typing import Optional

from pymongo.database import Database

from todo_api.config import settings
from todo_api.entities.user import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for registered accounts"""

    def __init__(self, db: Database):
        super().__init__(db, settings.MONGODB_USERS_COLLECTION, User)

    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username"""
        return self.find_one({"username": username})

    def create_user(self, username: str, password_hash: str) -> User:
        """Create a new user"""
        user = User(
            username=username,
            password=password_hash,
            created_at=int(time.time() * 1000),
        )
        return self.insert_one(user)
