"""Todo entities: the per-user document and the task items embedded in it."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import BaseEntity


class TodoItem(BaseModel):
    """
    A single task inside a user's ``todos`` array.

    Optional fields are stored exactly as the client sent them, so they are
    typed ``Any`` rather than coerced.
    """

    id: int
    user_id: Any = Field(..., alias="userId")
    task: Any
    category: Any = None
    completed: bool = False
    priority: Any = "medium"
    due_date: Any = Field("", alias="dueDate")
    notes: Any = ""
    created_at: int = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class TodoList(BaseEntity):
    """User document as seen from the todo routes, keyed by ``userId``."""

    user_id: Any = Field(..., alias="userId")
    # Raw documents: items rewritten by PUT may no longer validate as TodoItem
    todos: Optional[List[dict]] = Field(default_factory=list)
