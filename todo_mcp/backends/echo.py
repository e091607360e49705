"""
Echo backend

Accepts every admitted tool call and returns the parameters it received. Used
when no persistent backend is configured, and to inspect admission results.
"""

from typing import Any, Dict
import logging

from todo_mcp.params.types import (
    ArchiveParams,
    CreateMultiParams,
    CreateParams,
    ReadParams,
    SearchParams,
    UpdateParams,
)

logger = logging.getLogger(__name__)


class EchoBackend:
    """Backend that echoes admitted parameters"""

    def __init__(self):
        self.calls: list = []

    def _echo(self, operation: str, params: Any) -> Dict[str, Any]:
        self.calls.append((operation, params))
        logger.debug(f"Echo backend accepted {operation}")
        return {"operation": operation, "params": params.to_arguments()}

    async def create(self, params: CreateParams) -> Dict[str, Any]:
        return self._echo("create", params)

    async def create_multi(self, params: CreateMultiParams) -> Dict[str, Any]:
        return self._echo("create_multi", params)

    async def read(self, params: ReadParams) -> Dict[str, Any]:
        return self._echo("read", params)

    async def update(self, params: UpdateParams) -> Dict[str, Any]:
        return self._echo("update", params)

    async def search(self, params: SearchParams) -> Dict[str, Any]:
        return self._echo("search", params)

    async def archive(self, params: ArchiveParams) -> Dict[str, Any]:
        return self._echo("archive", params)
