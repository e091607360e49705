"""Todo MCP server: tool-call admission layer for todo management."""

__version__ = "1.0.0"
