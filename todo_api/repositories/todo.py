"""Repository for the todo arrays embedded in user documents."""

from typing import Any, Dict, Optional

from pymongo.database import Database
from pymongo.results import UpdateResult

from todo_api.config import settings
from todo_api.entities.todo import TodoItem, TodoList

from .base import BaseRepository


class TodoRepository(BaseRepository[TodoList]):
    """
    Each operation is a single update on one user document, so it is
    atomic at the document level. Items are matched by their numeric ``id``.
    """

    def __init__(self, db: Database):
        super().__init__(db, settings.MONGODB_USERS_COLLECTION, TodoList)

    def find_by_user_id(self, user_id: Any) -> Optional[TodoList]:
        return self.find_one({"userId": user_id})

    def push_item(self, user_id: Any, item: TodoItem, upsert: bool = True) -> UpdateResult:
        """Append an item, creating the user document when ``upsert`` is set."""
        return self.update_one_raw(
            {"userId": user_id},
            {"$push": {"todos": item.model_dump(by_alias=True)}},
            upsert=upsert,
        )

    def set_item_fields(
        self, user_id: Any, todo_id: Any, fields: Dict[str, Any]
    ) -> UpdateResult:
        """Positional $set on the first item whose id matches."""
        return self.update_one_raw(
            {"userId": user_id, "todos.id": todo_id},
            {"$set": {f"todos.$.{name}": value for name, value in fields.items()}},
        )

    def pull_item(self, user_id: Any, todo_id: Any) -> UpdateResult:
        """Remove every item whose id matches."""
        return self.update_one_raw(
            {"userId": user_id, "todos.id": todo_id},
            {"$pull": {"todos": {"id": todo_id}}},
        )
