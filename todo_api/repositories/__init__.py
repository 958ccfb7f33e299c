"""Repository layer for database operations"""

from .base import BaseRepository
from .todo import TodoRepository
from .user import UserRepository

__all__ = ["BaseRepository", "TodoRepository", "UserRepository"]
