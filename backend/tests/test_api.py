"""HTTP contract tests for the todo and label routes."""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from todo_api.db.session import create_db_engine, create_session_factory
from todo_api.main import create_app
from todo_api.models.base import Base
from todo_api.stores.labels import DatabaseLabelStore
from todo_api.stores.memory import InMemoryLabelStore, InMemoryTodoStore
from todo_api.stores.todos import DatabaseTodoStore

ALLOWED_ORIGIN = "http://localhost:3001"


class _RowIdBoundsCases:
    """Id checks every backend must answer the same way; mixed into a ``TestCase``."""

    client: TestClient

    def test_ids_beyond_column_range_are_rejected_before_the_store(self) -> None:
        huge = 2**63

        responses = [
            self.client.get(f"/todos/{huge}"),
            self.client.patch(f"/todos/{huge}", json={"text": "ghost"}),
            self.client.delete(f"/todos/{huge}"),
            self.client.delete(f"/label/{huge}"),
            self.client.get("/todos/0"),
        ]

        for response in responses:
            self.assertEqual(response.status_code, 400)
            self.assertTrue(response.json()["detail"].startswith("Validation error: ["))

    def test_label_ids_beyond_column_range_are_rejected(self) -> None:
        response = self.client.post("/todos", json={"text": "dangling", "labels": [2**63]})

        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["detail"].startswith("Validation error: ["))
        self.assertEqual(self.client.get("/todos").json(), [])


class TodoApiTests(_RowIdBoundsCases, unittest.TestCase):
    def setUp(self) -> None:
        label_store = InMemoryLabelStore()
        app = create_app(InMemoryTodoStore(label_store), label_store, ALLOWED_ORIGIN)
        self.client = TestClient(app)

    def _create_label(self, name: str) -> dict:
        response = self.client.post("/label", json={"name": name})
        self.assertEqual(response.status_code, 201)
        return response.json()

    def test_root_returns_greeting(self) -> None:
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "Hello, world!")
        self.assertTrue(response.headers["content-type"].startswith("text/plain"))

    def test_create_todo_returns_created_entity(self) -> None:
        label = self._create_label("work")

        response = self.client.post("/todos", json={"text": "write report", "labels": [label["id"]]})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(
            response.json(),
            {"id": 1, "text": "write report", "completed": False, "labels": [label]},
        )

    def test_create_todo_without_labels_field(self) -> None:
        response = self.client.post("/todos", json={"text": "no labels"})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["labels"], [])

    def test_create_todo_rejects_invalid_text(self) -> None:
        empty = self.client.post("/todos", json={"text": ""})
        too_long = self.client.post("/todos", json={"text": "x" * 289})

        for response in (empty, too_long):
            self.assertEqual(response.status_code, 400)
            self.assertTrue(response.json()["detail"].startswith("Validation error: ["))
        self.assertEqual(self.client.get("/todos").json(), [])

    def test_body_not_matching_payload_shape_is_parse_error(self) -> None:
        missing = self.client.post("/todos", json={})
        wrong_type = self.client.post("/todos", json={"text": 5})
        wrong_labels = self.client.post("/todos", json={"text": "a", "labels": ["one"]})

        for response in (missing, wrong_type, wrong_labels):
            self.assertEqual(response.status_code, 400)
            self.assertTrue(response.json()["detail"].startswith("Json parse error: ["))
        self.assertIn("text: Field required", missing.json()["detail"])
        self.assertEqual(self.client.get("/todos").json(), [])

    def test_create_todo_accepts_max_length_text(self) -> None:
        response = self.client.post("/todos", json={"text": "x" * 288})

        self.assertEqual(response.status_code, 201)

    def test_malformed_json_is_reported_as_parse_error(self) -> None:
        response = self.client.post(
            "/todos",
            content=b'{"text": ',
            headers={"content-type": "application/json"},
        )

        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["detail"].startswith("Json parse error: ["))

    def test_create_todo_with_unknown_label_is_server_error(self) -> None:
        response = self.client.post("/todos", json={"text": "dangling", "labels": [99]})

        self.assertEqual(response.status_code, 500)

    def test_list_and_find_todos(self) -> None:
        self.client.post("/todos", json={"text": "first"})
        self.client.post("/todos", json={"text": "second"})

        listed = self.client.get("/todos")
        found = self.client.get("/todos/2")

        self.assertEqual(listed.status_code, 200)
        self.assertEqual([todo["text"] for todo in listed.json()], ["first", "second"])
        self.assertEqual(found.status_code, 200)
        self.assertEqual(found.json()["text"], "second")

    def test_find_missing_todo_is_not_found(self) -> None:
        response = self.client.get("/todos/5")

        self.assertEqual(response.status_code, 404)

    def test_patch_todo_partially_updates(self) -> None:
        home = self._create_label("home")
        work = self._create_label("work")
        self.client.post("/todos", json={"text": "a", "labels": [home["id"]]})

        completed = self.client.patch("/todos/1", json={"completed": True})
        relabelled = self.client.patch("/todos/1", json={"labels": [work["id"]]})

        self.assertEqual(completed.status_code, 201)
        self.assertEqual(completed.json(), {"id": 1, "text": "a", "completed": True, "labels": [home]})
        self.assertEqual(relabelled.status_code, 201)
        self.assertEqual(relabelled.json(), {"id": 1, "text": "a", "completed": True, "labels": [work]})

    def test_patch_missing_todo_is_not_found(self) -> None:
        response = self.client.patch("/todos/3", json={"text": "ghost"})

        self.assertEqual(response.status_code, 404)

    def test_patch_rejects_empty_text(self) -> None:
        self.client.post("/todos", json={"text": "keep"})

        response = self.client.patch("/todos/1", json={"text": ""})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.get("/todos/1").json()["text"], "keep")

    def test_delete_todo(self) -> None:
        self.client.post("/todos", json={"text": "temporary"})

        deleted = self.client.delete("/todos/1")
        deleted_again = self.client.delete("/todos/1")

        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(deleted.content, b"")
        self.assertEqual(deleted_again.status_code, 404)
        self.assertEqual(self.client.get("/todos/1").status_code, 404)

    def test_label_routes(self) -> None:
        created = self.client.post("/label", json={"name": "errand"})
        listed = self.client.get("/label")
        deleted = self.client.delete(f"/label/{created.json()['id']}")

        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json(), {"id": 1, "name": "errand"})
        self.assertEqual(listed.status_code, 200)
        self.assertEqual(listed.json(), [{"id": 1, "name": "errand"}])
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(self.client.get("/label").json(), [])

    def test_label_failures_are_server_errors(self) -> None:
        self._create_label("same")

        duplicated = self.client.post("/label", json={"name": "same"})
        missing = self.client.delete("/label/42")

        self.assertEqual(duplicated.status_code, 500)
        self.assertEqual(missing.status_code, 500)

    def test_label_name_is_validated(self) -> None:
        empty = self.client.post("/label", json={"name": ""})
        too_long = self.client.post("/label", json={"name": "n" * 256})

        self.assertEqual(empty.status_code, 400)
        self.assertEqual(too_long.status_code, 400)

    def test_cors_allows_configured_origin_only(self) -> None:
        allowed = self.client.get("/todos", headers={"Origin": ALLOWED_ORIGIN})
        other = self.client.get("/todos", headers={"Origin": "http://evil.example"})

        self.assertEqual(allowed.headers.get("access-control-allow-origin"), ALLOWED_ORIGIN)
        self.assertNotIn("access-control-allow-origin", other.headers)


class DatabaseBackedTodoApiTests(_RowIdBoundsCases, unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_db_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        session_factory = create_session_factory(self.engine)
        app = create_app(
            DatabaseTodoStore(session_factory),
            DatabaseLabelStore(session_factory),
            ALLOWED_ORIGIN,
        )
        self.client = TestClient(app)

    def tearDown(self) -> None:
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def test_todo_label_scenario(self) -> None:
        home = self.client.post("/label", json={"name": "home"}).json()
        work = self.client.post("/label", json={"name": "work"}).json()

        created = self.client.post("/todos", json={"text": "clean", "labels": [work["id"], home["id"]]})
        self.assertEqual(created.status_code, 201)
        todo_id = created.json()["id"]
        self.assertEqual(created.json()["labels"], [home, work])

        self.assertEqual(self.client.delete(f"/label/{home['id']}").status_code, 204)
        self.assertEqual(self.client.get(f"/todos/{todo_id}").json()["labels"], [work])

        patched = self.client.patch(f"/todos/{todo_id}", json={"text": "cleaned", "labels": []})
        self.assertEqual(patched.status_code, 201)
        self.assertEqual(patched.json(), {"id": todo_id, "text": "cleaned", "completed": False, "labels": []})

        self.assertEqual(self.client.delete(f"/todos/{todo_id}").status_code, 204)
        self.assertEqual(self.client.get("/todos").json(), [])


if __name__ == "__main__":
    unittest.main()
