from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from todo_api.database.mongo import get_db
from todo_api.dtos import RegisterRequest, RegisterResponse
from todo_api.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(payload: RegisterRequest, db: Database = Depends(get_db)):
    """Register a username/password pair."""
    service = AuthService(db)
    return service.register(payload.username, payload.password)
