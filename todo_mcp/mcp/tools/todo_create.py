"""
Create Todo MCP Tool

Creates a single todo. Types 'phase' and 'subtask' must name a parent todo.
"""

from typing import Any, Dict, Mapping

from todo_mcp.mcp.base_tool import BaseMCPTool
from todo_mcp.params.extractors import extract_create_params
from todo_mcp.params.types import CreateParams
from todo_mcp.params.validators import PRIORITY, TODO_TYPE, valid_values


class TodoCreateTool(BaseMCPTool):
    """MCP Tool for creating a todo"""

    name = "todo_create"
    description = (
        "Create a new todo with full metadata. TIP: Use parent_id for phases and subtasks. "
        "Types 'phase' and 'subtask' require parent_id."
    )
    parameters = {
        "type": "object",
        "properties": {
            "task": {"type": "string", "description": "Task description"},
            "priority": {"type": "string", "enum": list(valid_values(PRIORITY)), "default": "high", "description": "Task priority (high, medium, low)"},
            "type": {"type": "string", "enum": list(valid_values(TODO_TYPE)), "default": "feature", "description": "Todo type (feature, bug, refactor, research, multi-phase, phase, subtask)"},
            "template": {"type": "string", "description": "Optional template name"},
            "parent_id": {"type": "string", "description": "Parent todo ID (required for phase/subtask types)"}
        },
        "required": ["task"]
    }

    def extract(self, arguments: Mapping[str, Any]) -> CreateParams:
        return extract_create_params(arguments)

    async def run(self, params: CreateParams) -> Dict[str, Any]:
        return await self.backend.create(params)

    def success_message(self, params: CreateParams) -> str:
        return f"Todo '{params.task}' creation requested"


def register_todo_create_tool(mcp_server, backend):
    """Register todo_create tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = TodoCreateTool(backend)
    mcp_server.register_tool(MCPTool(
        name=tool.name,
        description=tool.description,
        parameters=tool.parameters,
        handler=tool.execute
    ))
