"""
Create Multi Todo MCP Tool

Creates a parent todo and its child phases in one call. Children may not be
multi-phase todos themselves.
"""

from typing import Any, Dict, Mapping

from todo_mcp.mcp.base_tool import BaseMCPTool
from todo_mcp.params.extractors import extract_create_multi_params
from todo_mcp.params.types import CreateMultiParams


class TodoCreateMultiTool(BaseMCPTool):
    """MCP Tool for creating a parent todo with children"""

    name = "todo_create_multi"
    description = (
        "Create multiple todos with parent-child relationships in one operation. "
        "Perfect for multi-phase projects."
    )
    parameters = {
        "type": "object",
        "properties": {
            "parent": {
                "type": "object",
                "description": "Parent todo information",
                "properties": {
                    "task": {"type": "string", "description": "Parent task description"},
                    "priority": {"type": "string", "description": "Priority (high, medium, low)", "default": "high"},
                    "type": {"type": "string", "description": "Todo type (defaults to multi-phase)", "default": "multi-phase"}
                },
                "required": ["task"]
            },
            "children": {
                "type": "array",
                "description": "Array of child todos",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "properties": {
                        "task": {"type": "string", "description": "Child task description"},
                        "priority": {"type": "string", "description": "Priority (high, medium, low)", "default": "medium"},
                        "type": {"type": "string", "description": "Todo type (defaults to phase)", "default": "phase"}
                    },
                    "required": ["task"]
                }
            }
        },
        "required": ["parent", "children"]
    }

    def extract(self, arguments: Mapping[str, Any]) -> CreateMultiParams:
        return extract_create_multi_params(arguments)

    async def run(self, params: CreateMultiParams) -> Dict[str, Any]:
        return await self.backend.create_multi(params)

    def success_message(self, params: CreateMultiParams) -> str:
        count = len(params.children)
        return f"Todo '{params.parent.task}' with {count} child{'ren' if count != 1 else ''} creation requested"


def register_todo_create_multi_tool(mcp_server, backend):
    """Register todo_create_multi tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = TodoCreateMultiTool(backend)
    mcp_server.register_tool(MCPTool(
        name=tool.name,
        description=tool.description,
        parameters=tool.parameters,
        handler=tool.execute
    ))
