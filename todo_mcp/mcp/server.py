"""
MCP Server Implementation

This module implements the MCP (Model Context Protocol) server that holds the
todo tools and dispatches tool calls to them.

- Tool calls are looked up by name
- Arguments pass through parameter admission before reaching a backend
- Admission failures are reported with their message unchanged
"""

from typing import Any, Awaitable, Callable, Dict, Mapping, Optional
from dataclasses import dataclass
import logging

from todo_mcp.mcp.base_tool import MCPToolError, create_error_response

logger = logging.getLogger(__name__)


class ToolNotFoundError(MCPToolError, ValueError):
    """Raised when a tool name is not registered"""
    def __init__(self, name: str, available: list):
        super().__init__(
            code="TOOL_NOT_FOUND",
            message=f"Tool {name} not found. Available tools: {available}",
            details={"tool": name},
        )


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    parameters: Dict[str, Any]
    handler: Callable[[Mapping[str, Any]], Awaitable[Dict[str, Any]]]


class MCPServer:
    """
    MCP Server for Todo Management

    Provides tools that agents can invoke to manage todos.
    """

    def __init__(self, name: str = "todo-mcp-server"):
        self.tools: Dict[str, MCPTool] = {}
        self.name = name
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.info(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise ToolNotFoundError(name, list(self.tools.keys()))
        return self.tools[name]

    def list_tools(self) -> list[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    async def invoke_tool(self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Invoke a tool with raw arguments

        Args:
            tool_name: Name of the tool to invoke
            arguments: Raw tool-call arguments

        Returns:
            Tool execution result

        Raises:
            ToolNotFoundError: If the tool is not registered
            ParameterError: If the arguments fail admission
        """
        tool = self.get_tool(tool_name)

        logger.info(f"Invoking MCP tool: {tool_name}")

        try:
            result = await tool.handler(arguments if arguments is not None else {})
            logger.info(f"Tool {tool_name} executed successfully")
            return result
        except MCPToolError as e:
            logger.warning(f"Tool {tool_name} rejected call: {e.message}")
            raise
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {str(e)}")
            raise

    async def call_tool(self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Invoke a tool and always return a response envelope

        Unexpected failures are reported as INTERNAL_ERROR; tool errors keep
        their own code and message.
        """
        try:
            return await self.invoke_tool(tool_name, arguments)
        except MCPToolError as e:
            return create_error_response(e)
        except Exception as e:
            return create_error_response(MCPToolError(
                code="INTERNAL_ERROR",
                message=f"Failed to execute tool: {str(e)}",
                details={"tool": tool_name},
            ))

    def get_tool_schemas(self) -> Dict[str, Dict[str, Any]]:
        """Get JSON schemas for all registered tools"""
        return {
            name: {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.parameters
            }
            for name, tool in self.tools.items()
        }

