"""Shared pytest fixtures: echo backend, registered MCP server, HTTP client."""

import pytest
from fastapi.testclient import TestClient

from todo_mcp.backends import EchoBackend
from todo_mcp.config import Settings
from todo_mcp.mcp.server import MCPServer
from todo_mcp.mcp.tools import register_todo_tools


@pytest.fixture
def backend() -> EchoBackend:
    return EchoBackend()


@pytest.fixture
def mcp_server(backend: EchoBackend) -> MCPServer:
    """MCP server with every todo tool registered against the echo backend"""
    server = MCPServer(name="test-todo-server")
    register_todo_tools(server, backend)
    return server


@pytest.fixture
def client(backend: EchoBackend) -> TestClient:
    from todo_mcp.main import create_app

    settings = Settings(environment="test", log_level="WARNING", mcp_server_name="test-todo-server")
    return TestClient(create_app(settings=settings, backend=backend))
