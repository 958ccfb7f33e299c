"""
MongoDB connection helpers.

One MongoClient is shared by the whole process. PyMongo pools connections
internally and the client is thread-safe, so FastAPI's threadpool handlers
can all use it.
"""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.database import Database

from todo_api.config import settings

logger = logging.getLogger(__name__)

_client: MongoClient | None = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )
    return _client


def get_database() -> Database:
    client = get_client()
    return client[settings.MONGODB_DB_NAME]


def get_db():
    db = get_database()
    try:
        yield db
    finally:
        # PyMongo manages connection pooling automatically; nothing to close here.
        pass


def close_client() -> None:
    """Close the shared client; the next get_client() call reconnects."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")
