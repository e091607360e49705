"""
Search Todos MCP Tool

Full-text search across todos. An empty scope searches every scope.
"""

from typing import Any, Dict, Mapping

from todo_mcp.mcp.base_tool import BaseMCPTool
from todo_mcp.params.extractors import (
    DEFAULT_SEARCH_LIMIT,
    MAX_SEARCH_LIMIT,
    extract_search_params,
)
from todo_mcp.params.types import SearchParams


class TodoSearchTool(BaseMCPTool):
    """MCP Tool for searching todos"""

    name = "todo_search"
    description = "Full-text search across all todos"
    parameters = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search terms"},
            "scope": {"type": "array", "items": {"type": "string"}, "description": "Search scope (task, findings, tests, all)"},
            "filters": {
                "type": "object",
                "description": "Search filters",
                "properties": {
                    "status": {"type": "string", "description": "Status filter"},
                    "date_from": {"type": "string", "description": "Date in YYYY-MM-DD format"},
                    "date_to": {"type": "string", "description": "Date in YYYY-MM-DD format"}
                }
            },
            "limit": {"type": "number", "default": DEFAULT_SEARCH_LIMIT, "maximum": MAX_SEARCH_LIMIT, "description": "Maximum results"}
        },
        "required": ["query"]
    }

    def extract(self, arguments: Mapping[str, Any]) -> SearchParams:
        return extract_search_params(arguments)

    async def run(self, params: SearchParams) -> Dict[str, Any]:
        return await self.backend.search(params)


def register_todo_search_tool(mcp_server, backend):
    """Register todo_search tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = TodoSearchTool(backend)
    mcp_server.register_tool(MCPTool(
        name=tool.name,
        description=tool.description,
        parameters=tool.parameters,
        handler=tool.execute
    ))
