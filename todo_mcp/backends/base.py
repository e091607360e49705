"""Backend interface consumed by the todo MCP tools."""

from typing import Any, Dict, Protocol

from todo_mcp.params.types import (
    ArchiveParams,
    CreateMultiParams,
    CreateParams,
    ReadParams,
    SearchParams,
    UpdateParams,
)


class TodoBackend(Protocol):
    """
    Domain operations behind the todo tools

    Every method receives a record produced by a successful extraction and
    returns JSON-compatible data for the response envelope.
    """

    async def create(self, params: CreateParams) -> Dict[str, Any]: ...

    async def create_multi(self, params: CreateMultiParams) -> Dict[str, Any]: ...

    async def read(self, params: ReadParams) -> Dict[str, Any]: ...

    async def update(self, params: UpdateParams) -> Dict[str, Any]: ...

    async def search(self, params: SearchParams) -> Dict[str, Any]: ...

    async def archive(self, params: ArchiveParams) -> Dict[str, Any]: ...
