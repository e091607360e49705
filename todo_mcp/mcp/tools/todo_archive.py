"""
Archive Todo MCP Tool

Archives a completed todo, optionally into an explicit quarter.
"""

from typing import Any, Dict, Mapping

from todo_mcp.mcp.base_tool import BaseMCPTool
from todo_mcp.params.extractors import extract_archive_params
from todo_mcp.params.types import ArchiveParams


class TodoArchiveTool(BaseMCPTool):
    """MCP Tool for archiving todos"""

    name = "todo_archive"
    description = "Archive completed todo to daily folder"
    parameters = {
        "type": "object",
        "properties": {
            "id": {"type": "string", "description": "Todo ID to archive"},
            "quarter": {"type": "string", "description": "Quarter override, e.g. 2025-Q1 (optional)"}
        },
        "required": ["id"]
    }

    def extract(self, arguments: Mapping[str, Any]) -> ArchiveParams:
        return extract_archive_params(arguments)

    async def run(self, params: ArchiveParams) -> Dict[str, Any]:
        return await self.backend.archive(params)

    def success_message(self, params: ArchiveParams) -> str:
        return f"Todo {params.id} archive requested"


def register_todo_archive_tool(mcp_server, backend):
    """Register todo_archive tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = TodoArchiveTool(backend)
    mcp_server.register_tool(MCPTool(
        name=tool.name,
        description=tool.description,
        parameters=tool.parameters,
        handler=tool.execute
    ))
