"""
Read Todo MCP Tool

Reads a single todo by ID, or lists todos matching a filter.
"""

from typing import Any, Dict, Mapping

from todo_mcp.mcp.base_tool import BaseMCPTool
from todo_mcp.params.extractors import extract_read_params
from todo_mcp.params.types import ReadParams
from todo_mcp.params.validators import FORMAT, valid_values


class TodoReadTool(BaseMCPTool):
    """MCP Tool for reading todos"""

    name = "todo_read"
    description = "Read single todo or list all todos"
    parameters = {
        "type": "object",
        "properties": {
            "id": {"type": "string", "description": "Specific todo ID"},
            "filter": {
                "type": "object",
                "description": "Filter options",
                "properties": {
                    "status": {"type": "string", "description": "Status filter (in_progress, completed, blocked, all)"},
                    "priority": {"type": "string", "description": "Priority filter (high, medium, low, all)"},
                    "days": {"type": "number", "description": "Todos from last N days"}
                }
            },
            "format": {"type": "string", "enum": list(valid_values(FORMAT)), "default": "summary", "description": "Output format (full, summary, list)"}
        },
        "required": []
    }

    def extract(self, arguments: Mapping[str, Any]) -> ReadParams:
        return extract_read_params(arguments)

    async def run(self, params: ReadParams) -> Dict[str, Any]:
        return await self.backend.read(params)


def register_todo_read_tool(mcp_server, backend):
    """Register todo_read tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = TodoReadTool(backend)
    mcp_server.register_tool(MCPTool(
        name=tool.name,
        description=tool.description,
        parameters=tool.parameters,
        handler=tool.execute
    ))
