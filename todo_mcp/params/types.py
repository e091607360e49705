"""
Parameter records for the todo tools.

Records are built by the extractors in ``todo_mcp.params.extractors`` and are
never mutated afterwards. A record is only guaranteed valid when it came out of
a successful extraction; constructing one by hand performs no checks.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple


def _as_arguments(record: Any) -> Dict[str, Any]:
    """Convert a record into a JSON-compatible arguments mapping."""
    def convert(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: convert(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [convert(v) for v in value]
        return value

    return convert(asdict(record))


@dataclass(frozen=True)
class CreateParams:
    """Parameters for todo_create"""
    task: str
    priority: str = "high"
    type: str = "feature"
    template: str = ""
    parent_id: str = ""

    def to_arguments(self) -> Dict[str, Any]:
        return _as_arguments(self)


@dataclass(frozen=True)
class CreateInfo:
    """One todo inside a todo_create_multi call"""
    task: str
    priority: str = ""
    type: str = ""

    def to_arguments(self) -> Dict[str, Any]:
        return _as_arguments(self)


@dataclass(frozen=True)
class CreateMultiParams:
    """Parameters for todo_create_multi"""
    parent: CreateInfo
    children: Tuple[CreateInfo, ...] = ()

    def to_arguments(self) -> Dict[str, Any]:
        return _as_arguments(self)


@dataclass(frozen=True)
class TodoFilter:
    """Filter options for todo_read"""
    status: str = ""
    priority: str = ""
    days: int = 0


@dataclass(frozen=True)
class ReadParams:
    """Parameters for todo_read"""
    id: str = ""
    filter: TodoFilter = field(default_factory=TodoFilter)
    format: str = "summary"

    def to_arguments(self) -> Dict[str, Any]:
        return _as_arguments(self)


@dataclass(frozen=True)
class TodoMetadata:
    """Metadata updates carried by todo_update"""
    status: str = ""
    priority: str = ""
    current_test: str = ""


@dataclass(frozen=True)
class UpdateParams:
    """Parameters for todo_update"""
    id: str
    section: str = ""
    operation: str = "append"
    content: str = ""
    metadata: TodoMetadata = field(default_factory=TodoMetadata)

    def to_arguments(self) -> Dict[str, Any]:
        return _as_arguments(self)


@dataclass(frozen=True)
class SearchFilters:
    """Filter options for todo_search"""
    status: str = ""
    date_from: str = ""
    date_to: str = ""


@dataclass(frozen=True)
class SearchParams:
    """Parameters for todo_search (an empty scope means all scopes)"""
    query: str
    scope: Tuple[str, ...] = ()
    filters: SearchFilters = field(default_factory=SearchFilters)
    limit: int = 20

    def to_arguments(self) -> Dict[str, Any]:
        return _as_arguments(self)


@dataclass(frozen=True)
class ArchiveParams:
    """Parameters for todo_archive"""
    id: str
    quarter: str = ""

    def to_arguments(self) -> Dict[str, Any]:
        return _as_arguments(self)
