"""
Parameter admission for the todo tools

Converts untyped tool-call arguments into validated parameter records.
"""

from todo_mcp.params.extractors import (
    EXTRACTORS,
    extract_archive_params,
    extract_create_multi_params,
    extract_create_params,
    extract_params,
    extract_read_params,
    extract_search_params,
    extract_update_params,
)
from todo_mcp.params.types import (
    ArchiveParams,
    CreateInfo,
    CreateMultiParams,
    CreateParams,
    ReadParams,
    SearchFilters,
    SearchParams,
    TodoFilter,
    TodoMetadata,
    UpdateParams,
)

__all__ = [
    "EXTRACTORS",
    "extract_params",
    "extract_create_params",
    "extract_create_multi_params",
    "extract_read_params",
    "extract_update_params",
    "extract_search_params",
    "extract_archive_params",
    "ArchiveParams",
    "CreateInfo",
    "CreateMultiParams",
    "CreateParams",
    "ReadParams",
    "SearchFilters",
    "SearchParams",
    "TodoFilter",
    "TodoMetadata",
    "UpdateParams",
]
