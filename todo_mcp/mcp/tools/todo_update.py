"""
Update Todo MCP Tool

Updates a section of a todo and/or its metadata.
"""

from typing import Any, Dict, Mapping

from todo_mcp.mcp.base_tool import BaseMCPTool
from todo_mcp.params.extractors import extract_update_params
from todo_mcp.params.types import UpdateParams
from todo_mcp.params.validators import OPERATION, PRIORITY, valid_values


class TodoUpdateTool(BaseMCPTool):
    """MCP Tool for updating todos"""

    name = "todo_update"
    description = "Update todo content or metadata"
    parameters = {
        "type": "object",
        "properties": {
            "id": {"type": "string", "description": "Todo ID to update"},
            "section": {"type": "string", "description": "Section to update (status, findings, tests, checklist, scratchpad)"},
            "operation": {"type": "string", "enum": list(valid_values(OPERATION)), "default": "append", "description": "Update operation (append, replace, prepend, toggle)"},
            "content": {"type": "string", "description": "Content to add/update"},
            "metadata": {
                "type": "object",
                "description": "Metadata to update",
                "properties": {
                    "status": {"type": "string", "description": "Todo status"},
                    "priority": {"type": "string", "enum": list(valid_values(PRIORITY)), "description": "Todo priority"},
                    "current_test": {"type": "string", "description": "Current test being worked on"}
                }
            }
        },
        "required": ["id"]
    }

    def extract(self, arguments: Mapping[str, Any]) -> UpdateParams:
        return extract_update_params(arguments)

    async def run(self, params: UpdateParams) -> Dict[str, Any]:
        return await self.backend.update(params)

    def success_message(self, params: UpdateParams) -> str:
        return f"Todo {params.id} update requested"


def register_todo_update_tool(mcp_server, backend):
    """Register todo_update tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = TodoUpdateTool(backend)
    mcp_server.register_tool(MCPTool(
        name=tool.name,
        description=tool.description,
        parameters=tool.parameters,
        handler=tool.execute
    ))
