"""
MCP Base Tool Interface

Provides base functionality for all todo MCP tools including:
- Parameter admission (raw arguments -> typed parameter record)
- Error types and standardized response envelopes
- Logging

A tool never hands raw arguments to its backend: the backend only ever sees a
record produced by a successful extraction.
"""

from typing import Any, Dict, Mapping, Optional
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class MCPToolError(Exception):
    """Base exception for MCP tool errors"""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ParameterError(MCPToolError):
    """
    Raised when tool arguments fail admission

    The message is part of the tool contract and is surfaced to the caller
    unchanged.
    """
    def __init__(self, message: str, field: Optional[str] = None, **details: Any):
        if field is not None:
            details = {"field": field, **details}
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)


class BaseMCPTool(ABC):
    """
    Base class for all todo MCP tools

    Subclasses declare the tool name, description, JSON schema and extractor,
    and implement ``run`` against the backend with an already validated
    parameter record.
    """

    name: str = ""
    description: str = ""
    parameters: Dict[str, Any] = {}

    def __init__(self, backend: Any):
        self.backend = backend

    @abstractmethod
    def extract(self, arguments: Mapping[str, Any]) -> Any:
        """Turn raw arguments into this tool's parameter record"""
        ...

    def log_tool_invocation(self, arguments: Mapping[str, Any]) -> None:
        """
        Log MCP tool invocation for audit trail

        Args:
            arguments: Raw tool arguments (only the keys are logged)
        """
        logger.info(f"MCP Tool Invocation: {self.name} | Argument keys: {sorted(arguments.keys())}")

    async def execute(self, arguments: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Admit the arguments and run the tool

        Args:
            arguments: Raw tool-call arguments

        Returns:
            Standardized success response

        Raises:
            ParameterError: If the arguments fail admission
        """
        arguments = arguments if arguments is not None else {}
        self.log_tool_invocation(arguments)

        params = self.extract(arguments)
        data = await self.run(params)

        return create_success_response(data=data, message=self.success_message(params))

    @abstractmethod
    async def run(self, params: Any) -> Dict[str, Any]:
        """
        Execute the tool logic with a validated parameter record

        Must be implemented by subclasses
        """
        pass

    def success_message(self, params: Any) -> Optional[str]:
        """Optional human-readable message for a successful call"""
        return None


def create_error_response(error: MCPToolError) -> Dict[str, Any]:
    """
    Create a standardized error response

    Args:
        error: The MCPToolError to convert

    Returns:
        Standardized error response dictionary
    """
    return {
        "success": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details
        }
    }


def create_success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a standardized success response

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Standardized success response dictionary
    """
    response = {
        "success": True,
        "data": data
    }

    if message:
        response["message"] = message

    return response
