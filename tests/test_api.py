"""HTTP-level tests: status codes and bodies through the FastAPI app."""
import logging

from bson import ObjectId
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from todo_api.config import settings


class TestRegister:
    def test_created(self, client, users_collection):
        response = client.post("/api/auth/register", json={"username": "alice", "password": "pw"})

        assert response.status_code == 201
        assert response.json() == {
            "message": "User registered successfully",
            "user": {"username": "alice"},
        }
        users_collection.insert_one.assert_called_once()

    def test_missing_password(self, client, users_collection):
        response = client.post("/api/auth/register", json={"username": "alice"})

        assert response.status_code == 400
        assert response.json() == {"error": "Username and password are required"}
        users_collection.insert_one.assert_not_called()

    def test_duplicate(self, client, users_collection):
        users_collection.find_one.return_value = {"username": "alice", "password": "x"}

        response = client.post("/api/auth/register", json={"username": "alice", "password": "pw"})

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

    def test_database_failure_is_generic_500(self, client, users_collection):
        users_collection.find_one.side_effect = PyMongoError("connection refused")

        response = client.post("/api/auth/register", json={"username": "alice", "password": "pw"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "connection refused" not in response.text

    def test_body_that_is_not_an_object(self, client):
        response = client.post("/api/auth/register", json=["alice", "pw"])

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"


class TestTodos:
    def test_add(self, client, users_collection):
        response = client.post("/api/todos", json={"userId": "u1", "task": "buy milk"})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Todo added successfully"
        assert body["result"]["matchedCount"] == 1
        item = users_collection.update_one.call_args[0][1]["$push"]["todos"]
        assert (item["priority"], item["dueDate"], item["notes"], item["completed"]) == (
            "medium",
            "",
            "",
            False,
        )

    def test_add_missing_task(self, client):
        response = client.post("/api/todos", json={"userId": "u1"})

        assert response.status_code == 400
        assert response.json() == {"error": "User ID and task are required"}

    def test_add_then_list_returns_same_id(self, client, users_collection):
        client.post("/api/todos", json={"userId": "u1", "task": "buy milk"})
        pushed = users_collection.update_one.call_args[0][1]["$push"]["todos"]
        users_collection.find_one.return_value = {
            "_id": ObjectId(),
            "userId": "u1",
            "todos": [pushed],
        }

        response = client.get("/api/todos", params={"userId": "u1"})

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [pushed["id"]]
        assert response.json()[0]["task"] == "buy milk"

    def test_list_unknown_user(self, client):
        response = client.get("/api/todos", params={"userId": "nobody"})

        assert response.status_code == 200
        assert response.json() == []

    def test_list_requires_user_id(self, client):
        response = client.get("/api/todos")

        assert response.status_code == 400
        assert response.json() == {"error": "User ID is required"}

    def test_list_database_failure(self, client, users_collection):
        users_collection.find_one.side_effect = PyMongoError("boom")

        response = client.get("/api/todos", params={"userId": "u1"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_toggle(self, client, users_collection):
        response = client.patch("/api/todos", json={"userId": "u1", "todoId": "7", "completed": True})

        assert response.status_code == 200
        assert response.json() == {"message": "Todo updated"}
        users_collection.update_one.assert_called_once_with(
            {"userId": "u1", "todos.id": 7},
            {"$set": {"todos.$.completed": True}},
            upsert=False,
        )

    def test_toggle_missing_todo_is_still_ok(self, client, users_collection, update_result):
        users_collection.update_one.return_value = update_result(matched=0, modified=0)

        response = client.patch("/api/todos", json={"userId": "u1", "todoId": 404, "completed": True})

        assert response.status_code == 200

    def test_toggle_missing_todo_strict(self, monkeypatch, client, users_collection, update_result):
        monkeypatch.setattr(settings, "TODO_STRICT_NOT_FOUND", True)
        users_collection.update_one.return_value = update_result(matched=0, modified=0)

        response = client.patch("/api/todos", json={"userId": "u1", "todoId": 404, "completed": True})

        assert response.status_code == 404
        assert response.json() == {"error": "Todo not found"}

    def test_toggle_requires_ids(self, client):
        response = client.patch("/api/todos", json={"userId": "u1", "completed": True})

        assert response.status_code == 400
        assert response.json() == {"error": "User ID and Todo ID are required"}

    def test_replace(self, client, users_collection):
        payload = {
            "userId": "u1",
            "todoId": 7,
            "task": "walk dog",
            "category": "home",
            "priority": "low",
            "dueDate": "2026-10-20",
            "notes": "",
            "completed": False,
        }

        response = client.put("/api/todos", json=payload)

        assert response.status_code == 200
        assert response.json() == {"message": "Todo updated"}
        update = users_collection.update_one.call_args[0][1]
        assert update["$set"]["todos.$.task"] == "walk dog"
        assert update["$set"]["todos.$.dueDate"] == "2026-10-20"

    def test_replace_without_ids_is_not_validated(self, client):
        response = client.put("/api/todos", json={"task": "orphan"})

        assert response.status_code == 200

    def test_delete(self, client, users_collection):
        response = client.request("DELETE", "/api/todos", json={"userId": "u1", "todoId": "7"})

        assert response.status_code == 200
        assert response.json() == {"message": "Todo deleted"}
        assert users_collection.update_one.call_args[0][1] == {"$pull": {"todos": {"id": 7}}}

    def test_delete_database_failure(self, client, users_collection):
        users_collection.update_one.side_effect = PyMongoError("boom")

        response = client.request("DELETE", "/api/todos", json={"userId": "u1", "todoId": 7})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestPlumbing:
    def test_request_id_is_echoed(self, client):
        response = client.get("/api/todos", params={"userId": "u1"}, headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    def test_request_id_is_generated(self, client):
        response = client.get("/api/todos", params={"userId": "u1"})

        assert response.headers["X-Request-ID"]

    def test_unknown_route_uses_error_body(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert "error" in response.json()

    def test_health_ok(self, client, mock_db):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["database"] == "ok"
        assert response.json()["version"] == settings.APP_VERSION
        mock_db.command.assert_called_once_with("ping")

    def test_health_database_down(self, client, mock_db):
        mock_db.command.side_effect = ServerSelectionTimeoutError("no servers")

        response = client.get("/api/health")

        assert response.status_code == 503
        assert response.json()["database"] == "unavailable"

    def test_unhandled_error_keeps_request_id_and_is_logged(self, client, users_collection, caplog):
        users_collection.find_one.side_effect = PyMongoError("boom")

        with caplog.at_level(logging.ERROR, logger="todo_api.request"):
            response = client.get(
                "/api/todos", params={"userId": "u1"}, headers={"X-Request-ID": "abc123"}
            )

        assert response.status_code == 500
        assert response.headers.get("X-Request-ID") == "abc123"
        access_lines = [r for r in caplog.records if r.name == "todo_api.request"]
        assert len(access_lines) == 1
        assert access_lines[0].levelno == logging.ERROR
        assert "500" in access_lines[0].getMessage()
