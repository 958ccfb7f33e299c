"""Registration DTOs"""

from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    # Presence is checked by the service so a missing field answers 400, not 422
    username: Optional[str] = None
    password: Optional[str] = None


class RegisteredUser(BaseModel):
    username: str


class RegisterResponse(BaseModel):
    message: str
    user: RegisteredUser
