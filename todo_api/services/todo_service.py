"""
Todo service - operations on the task array embedded in a user document.

Layered architecture: API -> Service -> Repository -> Database.
Each operation validates presence of its required inputs, issues exactly one
database call and returns the response payload.
"""

import logging
import re
import time
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pymongo.database import Database
from pymongo.results import UpdateResult

from todo_api.config import settings
from todo_api.entities.todo import TodoItem
from todo_api.repositories.todo import TodoRepository

logger = logging.getLogger(__name__)

# Mutable task fields, as (request attribute, stored field)
REPLACEABLE_FIELDS = (
    ("task", "task"),
    ("category", "category"),
    ("priority", "priority"),
    ("due_date", "dueDate"),
    ("notes", "notes"),
    ("completed", "completed"),
)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def normalize_todo_id(todo_id: Any) -> Any:
    """
    Clients send the id either as a number or as a string.

    Strings are parsed for a leading base-10 integer (``"42abc"`` -> 42);
    a string without one becomes None, which matches no stored item.
    Anything else is returned unchanged.
    """
    if isinstance(todo_id, str):
        match = _LEADING_INT.match(todo_id)
        return int(match.group(1)) if match else None
    return todo_id


def now_millis() -> int:
    return int(time.time() * 1000)


def serialize_update_result(result: UpdateResult) -> Dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 1 if upserted_id is not None else 0,
        "upsertedId": str(upserted_id) if upserted_id is not None else None,
    }


class TodoService:
    def __init__(self, db: Database):
        self.db = db
        self.todo_repo = TodoRepository(db)

    def add_todo(
        self,
        user_id: Any,
        task: Any,
        category: Any = None,
        completed: Any = None,
        priority: Any = None,
        due_date: Any = None,
        notes: Any = None,
    ) -> Dict[str, Any]:
        if not user_id or not task:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User ID and task are required",
            )

        created_at = now_millis()
        item = TodoItem(
            id=created_at,
            user_id=user_id,
            task=task,
            category=category,
            completed=bool(completed),
            priority=priority or "medium",
            due_date=due_date or "",
            notes=notes or "",
            created_at=created_at,
        )

        upsert = settings.TODO_UPSERT_USERS
        result = self.todo_repo.push_item(user_id, item, upsert=upsert)
        if not upsert and result.matched_count == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        logger.debug("Added todo %s for user %s", item.id, user_id)
        return {"message": "Todo added successfully", "result": serialize_update_result(result)}

    def list_todos(self, user_id: Optional[str]) -> List[dict]:
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="User ID is required"
            )
        todo_list = self.todo_repo.find_by_user_id(user_id)
        if todo_list is None:
            return []
        return todo_list.todos or []

    def set_completed(self, user_id: Any, todo_id: Any, completed: Any) -> Dict[str, str]:
        if not user_id or not todo_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User ID and Todo ID are required",
            )
        result = self.todo_repo.set_item_fields(
            user_id, normalize_todo_id(todo_id), {"completed": completed}
        )
        self._check_matched(result)
        return {"message": "Todo updated"}

    def replace_todo(self, user_id: Any, todo_id: Any, fields: Dict[str, Any]) -> Dict[str, str]:
        """
        Overwrite the mutable fields of one task.

        ``fields`` maps request attribute names to values and contains only
        what the caller actually sent. In "full" mode every mutable field is
        written, omitted ones as null; in "partial" mode only the sent ones.
        """
        if settings.TODO_REPLACE_MODE == "partial":
            updates = {stored: fields[attr] for attr, stored in REPLACEABLE_FIELDS if attr in fields}
        else:
            updates = {stored: fields.get(attr) for attr, stored in REPLACEABLE_FIELDS}

        if not updates:
            return {"message": "Todo updated"}

        result = self.todo_repo.set_item_fields(user_id, normalize_todo_id(todo_id), updates)
        self._check_matched(result)
        return {"message": "Todo updated"}

    def delete_todo(self, user_id: Any, todo_id: Any) -> Dict[str, str]:
        result = self.todo_repo.pull_item(user_id, normalize_todo_id(todo_id))
        self._check_matched(result)
        return {"message": "Todo deleted"}

    @staticmethod
    def _check_matched(result: UpdateResult) -> None:
        if settings.TODO_STRICT_NOT_FOUND and result.matched_count == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
