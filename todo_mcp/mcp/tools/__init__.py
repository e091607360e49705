"""
Todo MCP tools

Each module defines one tool and a ``register_*`` function; ``register_todo_tools``
registers the full set against a backend.
"""

from todo_mcp.mcp.tools.todo_archive import register_todo_archive_tool
from todo_mcp.mcp.tools.todo_create import register_todo_create_tool
from todo_mcp.mcp.tools.todo_create_multi import register_todo_create_multi_tool
from todo_mcp.mcp.tools.todo_read import register_todo_read_tool
from todo_mcp.mcp.tools.todo_search import register_todo_search_tool
from todo_mcp.mcp.tools.todo_update import register_todo_update_tool


def register_todo_tools(mcp_server, backend):
    """Register every todo tool with the MCP server"""
    register_todo_create_tool(mcp_server, backend)
    register_todo_create_multi_tool(mcp_server, backend)
    register_todo_read_tool(mcp_server, backend)
    register_todo_update_tool(mcp_server, backend)
    register_todo_search_tool(mcp_server, backend)
    register_todo_archive_tool(mcp_server, backend)
