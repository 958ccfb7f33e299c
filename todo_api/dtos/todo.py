"""Todo request and response DTOs.

Wire names are camelCase; attributes are snake_case with aliases. Values are
typed ``Any`` because optional fields are stored as sent.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _TodoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TodoCreateRequest(_TodoRequest):
    user_id: Any = Field(None, alias="userId")
    task: Any = None
    category: Any = None
    completed: Any = None
    priority: Any = None
    due_date: Any = Field(None, alias="dueDate")
    notes: Any = None


class TodoToggleRequest(_TodoRequest):
    user_id: Any = Field(None, alias="userId")
    todo_id: Any = Field(None, alias="todoId")
    completed: Any = None


class TodoReplaceRequest(_TodoRequest):
    user_id: Any = Field(None, alias="userId")
    todo_id: Any = Field(None, alias="todoId")
    task: Any = None
    category: Any = None
    priority: Any = None
    due_date: Any = Field(None, alias="dueDate")
    notes: Any = None
    completed: Any = None

    def supplied_fields(self) -> dict:
        """Mutable task fields the client actually sent, keyed by attribute name."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in ("user_id", "todo_id")
        }


class TodoDeleteRequest(_TodoRequest):
    user_id: Any = Field(None, alias="userId")
    todo_id: Any = Field(None, alias="todoId")


class UpdateResultResponse(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: Optional[str] = None


class TodoCreateResponse(BaseModel):
    message: str
    result: UpdateResultResponse


class MessageResponse(BaseModel):
    message: str
