from .base import BaseEntity, PyObjectId
from .todo import TodoItem, TodoList
from .user import User

__all__ = [
    "BaseEntity",
    "PyObjectId",
    "TodoItem",
    "TodoList",
    "User",
]
