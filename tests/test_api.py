"""HTTP surface tests"""

import pytest


class TestMeta:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        body = client.get("/").json()
        assert body["server"] == "test-todo-server"
        assert body["tools"] == "/tools"

    def test_list_tools(self, client):
        response = client.get("/tools")
        assert response.status_code == 200
        names = [tool["name"] for tool in response.json()["tools"]]
        assert "todo_create_multi" in names
        assert len(names) == 6


class TestToolCalls:
    def test_create_with_defaults(self, client):
        response = client.post("/tools/todo_create", json={"arguments": {"task": "Test task"}})

        assert response.status_code == 200
        assert response.json()["data"]["params"] == {
            "task": "Test task",
            "priority": "high",
            "type": "feature",
            "template": "",
            "parent_id": "",
        }

    def test_read_with_filter(self, client):
        response = client.post("/tools/todo_read", json={
            "arguments": {"filter": {"status": "in_progress", "priority": "high", "days": 7.0}, "format": "list"}
        })

        assert response.status_code == 200
        assert response.json()["data"]["params"] == {
            "id": "",
            "filter": {"status": "in_progress", "priority": "high", "days": 7},
            "format": "list",
        }

    def test_missing_body_means_no_arguments(self, client):
        response = client.post("/tools/todo_read")
        assert response.status_code == 200
        assert response.json()["data"]["params"]["format"] == "summary"

    def test_null_arguments_means_no_arguments(self, client):
        response = client.post("/tools/todo_read", json={"arguments": None})

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["data"]["params"]["format"] == "summary"

    def test_validation_error(self, client):
        response = client.post("/tools/todo_create_multi", json={
            "arguments": {"parent": {"task": "M"}, "children": [{"task": "C", "priority": "invalid"}]}
        })

        assert response.status_code == 422
        assert response.json()["error"]["message"] == "invalid priority 'invalid' for child 0"

    def test_unknown_tool(self, client):
        response = client.post("/tools/todo_explode", json={"arguments": {}})
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "TOOL_NOT_FOUND"


class TestAppFactory:
    def test_import_builds_no_app(self):
        import todo_mcp.main as main

        assert not hasattr(main, "app")

    def test_unknown_backend_fails_at_build_time(self):
        from todo_mcp.config import Settings
        from todo_mcp.main import create_app

        with pytest.raises(ValueError, match="Unknown todo backend: sqlite"):
            create_app(settings=Settings(log_level="WARNING", backend="sqlite"))
