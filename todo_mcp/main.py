"""Main FastAPI application for the Todo MCP server."""
from typing import Optional

from fastapi import FastAPI
import logging

from todo_mcp import __version__
from todo_mcp.backends import TodoBackend, get_backend
from todo_mcp.config import Settings, get_settings
from todo_mcp.mcp.server import MCPServer
from todo_mcp.mcp.tools import register_todo_tools
from todo_mcp.routers import tools
from todo_mcp.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, backend: Optional[TodoBackend] = None) -> FastAPI:
    """
    Build the FastAPI application with a fully registered MCP server.

    Args:
        settings: Server settings (read from the environment when omitted)
        backend: Todo backend (chosen by settings when omitted)
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.environment)

    app = FastAPI(
        title="Todo MCP Server",
        description="Tool-call server for todo management",
        version=__version__,
    )

    mcp_server = MCPServer(name=settings.mcp_server_name)
    register_todo_tools(mcp_server, backend if backend is not None else get_backend(settings.backend))
    app.state.mcp_server = mcp_server
    app.state.settings = settings

    @app.on_event("startup")
    async def startup_event():
        """Report the registered tools on startup."""
        logger.info(f"MCP Server {mcp_server.name} initialized with tools: {mcp_server.list_tools()}")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/")
    async def root():
        """Root endpoint - API welcome message."""
        return {
            "message": "Welcome to the Todo MCP Server",
            "server": mcp_server.name,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "tools": "/tools",
        }

    app.include_router(tools.router)

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "todo_mcp.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=get_settings().environment == "development",
    )
