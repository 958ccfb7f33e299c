"""Database index management for MongoDB collections."""

import logging

from pymongo.database import Database
from pymongo.errors import OperationFailure

from todo_api.config import settings

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database) -> None:
    """
    Ensure all required indexes exist.

    Registered accounts and todo lists share one collection, so the
    username index only covers documents that carry a username.
    """
    _ensure_users_indexes(db)
    logger.info("Database indexes ensured successfully")


def _ensure_users_indexes(db: Database) -> None:
    """Create indexes for the users collection."""
    collection = db[settings.MONGODB_USERS_COLLECTION]

    # Backs the registration uniqueness check against concurrent inserts
    try:
        collection.create_index(
            [("username", 1)],
            unique=True,
            partialFilterExpression={"username": {"$exists": True}},
            name="username_unique",
        )
        logger.debug("Created index: username_unique")
    except OperationFailure as e:
        if "already exists" not in str(e):
            logger.warning(f"Failed to create username_unique index: {e}")

    # Every todo operation filters by userId
    try:
        collection.create_index([("userId", 1)], name="user_id_idx")
        logger.debug("Created index: user_id_idx")
    except OperationFailure as e:
        if "already exists" not in str(e):
            logger.warning(f"Failed to create user_id_idx index: {e}")
