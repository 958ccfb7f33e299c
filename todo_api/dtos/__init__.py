"""Data Transfer Objects (DTOs) for API requests and responses"""

from .auth import RegisteredUser, RegisterRequest, RegisterResponse
from .health import HealthResponse
from .todo import (
    MessageResponse,
    TodoCreateRequest,
    TodoCreateResponse,
    TodoDeleteRequest,
    TodoReplaceRequest,
    TodoToggleRequest,
    UpdateResultResponse,
)

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "RegisteredUser",
    "RegisterRequest",
    "RegisterResponse",
    "TodoCreateRequest",
    "TodoCreateResponse",
    "TodoDeleteRequest",
    "TodoReplaceRequest",
    "TodoToggleRequest",
    "UpdateResultResponse",
]
