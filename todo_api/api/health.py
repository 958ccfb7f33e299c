import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from todo_api.config import settings
from todo_api.database.mongo import get_db
from todo_api.dtos import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check(db: Database = Depends(get_db)):
    """Ping MongoDB; 503 when it cannot be reached."""
    try:
        db.command("ping")
    except PyMongoError as e:
        logger.warning("Health check: database unreachable: %s", e)
        body = HealthResponse(status="unhealthy", database="unavailable", version=settings.APP_VERSION)
        return JSONResponse(status_code=503, content=body.model_dump())
    return HealthResponse(status="ok", database="ok", version=settings.APP_VERSION)
