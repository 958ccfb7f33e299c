"""Shared fixtures: a MagicMock pymongo database and a TestClient wired to it."""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.results import InsertOneResult, UpdateResult

from todo_api.config import settings
from todo_api.database.mongo import get_db
from todo_api.main import app


def make_update_result(matched: int = 1, modified: int = 1, upserted_id=None) -> UpdateResult:
    raw = {"n": 1 if upserted_id is not None else matched, "nModified": modified}
    if upserted_id is not None:
        raw["upserted"] = upserted_id
    return UpdateResult(raw, acknowledged=True)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Fast hashing and the default (backward-compatible) todo behaviour."""
    monkeypatch.setattr(settings, "PASSWORD_BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(settings, "TODO_UPSERT_USERS", True)
    monkeypatch.setattr(settings, "TODO_STRICT_NOT_FOUND", False)
    monkeypatch.setattr(settings, "TODO_REPLACE_MODE", "full")


@pytest.fixture
def mock_db():
    db = MagicMock()
    # db[<any name>] returns the same collection mock
    collection = db.__getitem__.return_value
    collection.find_one.return_value = None
    collection.insert_one.return_value = InsertOneResult(ObjectId(), acknowledged=True)
    collection.update_one.return_value = make_update_result()
    return db


@pytest.fixture
def users_collection(mock_db):
    return mock_db[settings.MONGODB_USERS_COLLECTION]


@pytest.fixture
def client(mock_db):
    app.dependency_overrides[get_db] = lambda: mock_db
    # Unhandled errors must surface as 500 responses, not test exceptions
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def update_result():
    """Factory for driver UpdateResult objects."""
    return make_update_result
