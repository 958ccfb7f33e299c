"""Todo API endpoints.

All five operations live on the same path and are told apart by method.
The target user and task travel in the JSON body (or the query string for
GET), not in the URL.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database

from todo_api.database.mongo import get_db
from todo_api.dtos import (
    MessageResponse,
    TodoCreateRequest,
    TodoCreateResponse,
    TodoDeleteRequest,
    TodoReplaceRequest,
    TodoToggleRequest,
)
from todo_api.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["Todos"])


@router.post("", response_model=TodoCreateResponse, status_code=status.HTTP_201_CREATED)
def add_todo(payload: TodoCreateRequest, db: Database = Depends(get_db)):
    """Append a task to the user's list, creating the list on first use."""
    service = TodoService(db)
    return service.add_todo(
        payload.user_id,
        payload.task,
        category=payload.category,
        completed=payload.completed,
        priority=payload.priority,
        due_date=payload.due_date,
        notes=payload.notes,
    )


@router.get("", response_model=List[dict])
def list_todos(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Database = Depends(get_db),
):
    service = TodoService(db)
    return service.list_todos(user_id)


@router.patch("", response_model=MessageResponse)
def toggle_todo(payload: TodoToggleRequest, db: Database = Depends(get_db)):
    """Set only the ``completed`` flag of one task."""
    service = TodoService(db)
    return service.set_completed(payload.user_id, payload.todo_id, payload.completed)


@router.put("", response_model=MessageResponse)
def replace_todo(payload: TodoReplaceRequest, db: Database = Depends(get_db)):
    service = TodoService(db)
    return service.replace_todo(payload.user_id, payload.todo_id, payload.supplied_fields())


@router.delete("", response_model=MessageResponse)
def delete_todo(payload: TodoDeleteRequest, db: Database = Depends(get_db)):
    service = TodoService(db)
    return service.delete_todo(payload.user_id, payload.todo_id)
