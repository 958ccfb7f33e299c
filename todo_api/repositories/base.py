"""Base repository pattern for MongoDB operations"""

from __future__ import annotations

from abc import ABC
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import UpdateResult

T = TypeVar("T", bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """Base repository providing common CRUD operations for MongoDB collections"""

    def __init__(self, db: Database, collection_name: str, model_class: Type[T]):
        self.db = db
        self.collection: Collection = db[collection_name]
        self.model_class = model_class

    def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        """Find a single document matching the query"""
        doc = self.collection.find_one(query)
        return self._to_model(doc)

    def insert_one(self, document: T) -> T:
        """Insert a single document"""
        doc_dict = document.model_dump(by_alias=True, exclude_none=True)

        result = self.collection.insert_one(doc_dict)
        doc_dict["_id"] = result.inserted_id
        return self._to_model(doc_dict)

    def update_one_raw(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
    ) -> UpdateResult:
        """
        Update a document with raw update operators (without auto-wrapping in $set).

        Args:
            query: Filter to find the document
            update: Raw update operations (e.g., {"$push": {...}}, {"$pull": {...}})
            upsert: If True, insert if not found

        Returns:
            The driver's UpdateResult, so callers can tell a match from a no-op
        """
        return self.collection.update_one(query, update, upsert=upsert)

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[T]:
        """Convert a dictionary to a model instance"""
        if not doc:
            return None
        return self.model_class.model_validate(doc)
