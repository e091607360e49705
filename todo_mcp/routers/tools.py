"""
Tools API Router

HTTP surface for the MCP tool server: lists tool schemas and accepts tool
calls. Responses use the standard success/error envelope.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from todo_mcp.mcp.server import MCPServer

import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tools"])


class ToolCallRequest(BaseModel):
    """Tool call request schema"""
    arguments: Optional[Dict[str, Any]] = None


class ToolSchema(BaseModel):
    """Tool schema item"""
    name: str
    description: str
    parameters: Dict[str, Any]


class ToolListResponse(BaseModel):
    """Tool list response schema"""
    tools: list[ToolSchema]


def get_server(request: Request) -> MCPServer:
    return request.app.state.mcp_server


@router.get("/tools", response_model=ToolListResponse)
async def list_tools(request: Request):
    """List registered tools with their JSON schemas."""
    schemas = get_server(request).get_tool_schemas()
    return ToolListResponse(tools=[ToolSchema(**schema) for schema in schemas.values()])


@router.post("/tools/{tool_name}")
async def call_tool(tool_name: str, request: Request, body: Optional[ToolCallRequest] = None):
    """
    Invoke a tool with the given arguments.

    Status codes:
    - 200: tool executed
    - 404: unknown tool
    - 422: arguments rejected by parameter admission
    - 500: unexpected tool failure
    """
    result = await get_server(request).call_tool(tool_name, body.arguments if body and body.arguments is not None else {})

    if result["success"]:
        return result

    code = result["error"]["code"]
    status_code = {"TOOL_NOT_FOUND": 404, "VALIDATION_ERROR": 422}.get(code, 500)
    logger.info(f"Tool call {tool_name} failed with {code}")
    return JSONResponse(status_code=status_code, content=result)
