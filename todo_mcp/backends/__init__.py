"""
Todo backends

A backend receives validated parameter records from the MCP tools and performs
the actual todo work. Persistence is supplied by the host; the echo backend
accepts every call and reports the admitted parameters back.
"""

from todo_mcp.backends.base import TodoBackend
from todo_mcp.backends.echo import EchoBackend


def get_backend(name: str) -> TodoBackend:
    """Build the backend selected in configuration."""
    if name == "echo":
        return EchoBackend()
    raise ValueError(f"Unknown todo backend: {name}")


__all__ = ["TodoBackend", "EchoBackend", "get_backend"]
