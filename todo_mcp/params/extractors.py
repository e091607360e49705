"""
Parameter extractors for the todo tools.

Each extractor turns the raw arguments mapping of one tool call into a typed
parameter record, or raises ParameterError describing the first violation.
Checks run in a fixed order: required fields, optional fields with defaults,
cross-field rules, then enum validation. Error messages are part of the tool
contract and are matched by callers.

Unknown keys are ignored.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from todo_mcp.mcp.base_tool import ParameterError
from todo_mcp.params.coercion import get_int, get_mapping, get_sequence, get_str
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
from todo_mcp.params.validators import (
    FORMAT,
    MULTI_PHASE,
    OPERATION,
    PARENTED_TYPES,
    PRIORITY,
    TODO_TYPE,
    enum_error_message,
    is_valid_format,
    is_valid_operation,
    is_valid_priority,
    is_valid_todo_type,
)

DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 100


def _arguments(arguments: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return arguments if arguments is not None else {}


def _require_str(args: Mapping[str, Any], key: str) -> str:
    value = get_str(args, key)
    if not value:
        raise ParameterError(f"missing required parameter '{key}'", field=key)
    return value


def _enum_error(domain: str, value: str) -> ParameterError:
    return ParameterError(enum_error_message(domain, value), field=domain, value=value)


def extract_create_params(arguments: Optional[Mapping[str, Any]]) -> CreateParams:
    """Extract and validate todo_create parameters."""
    args = _arguments(arguments)

    task = _require_str(args, "task")

    priority = get_str(args, "priority")
    if priority is None:
        priority = "high"

    todo_type = get_str(args, "type")
    if todo_type is None:
        todo_type = "feature"

    template = get_str(args, "template") or ""
    parent_id = get_str(args, "parent_id") or ""

    if not is_valid_priority(priority):
        raise _enum_error(PRIORITY, priority)

    if not is_valid_todo_type(todo_type):
        raise _enum_error(TODO_TYPE, todo_type)

    if todo_type in PARENTED_TYPES and not parent_id:
        raise ParameterError(
            f"type '{todo_type}' requires parent_id to be specified",
            field="parent_id",
        )

    return CreateParams(
        task=task,
        priority=priority,
        type=todo_type,
        template=template,
        parent_id=parent_id,
    )


def _read_create_info(obj: Mapping[str, Any], task: str,
                      default_priority: str, default_type: str) -> CreateInfo:
    priority = get_str(obj, "priority")
    todo_type = get_str(obj, "type")
    return CreateInfo(
        task=task,
        priority=default_priority if priority is None else priority,
        type=default_type if todo_type is None else todo_type,
    )


def extract_create_multi_params(arguments: Optional[Mapping[str, Any]]) -> CreateMultiParams:
    """
    Extract and validate todo_create_multi parameters

    The parent defaults to a high priority multi-phase todo, each child to a
    medium priority phase. All children are read before any is validated, so a
    structural problem in a later child wins over an enum problem in the
    parent.
    """
    args = _arguments(arguments)

    parent_obj = get_mapping(args, "parent")
    if parent_obj is None:
        raise ParameterError("parent is required", field="parent")

    parent_task = get_str(parent_obj, "task")
    if not parent_task:
        raise ParameterError("parent.task is required", field="parent.task")

    parent = _read_create_info(parent_obj, parent_task, "high", MULTI_PHASE)

    children_raw = get_sequence(args, "children")
    if children_raw is None:
        raise ParameterError("children array is required", field="children")
    if not children_raw:
        raise ParameterError("at least one child is required", field="children")

    children: List[CreateInfo] = []
    for i, child_raw in enumerate(children_raw):
        if not isinstance(child_raw, dict):
            raise ParameterError(f"invalid child at index {i}", field="children", index=i)

        child_task = get_str(child_raw, "task")
        if not child_task:
            raise ParameterError(
                f"children[{i}].task is required",
                field=f"children[{i}].task",
                index=i,
            )

        children.append(_read_create_info(child_raw, child_task, "medium", "phase"))

    if not is_valid_priority(parent.priority):
        raise ParameterError(
            f"invalid parent priority '{parent.priority}'",
            field="parent.priority",
            value=parent.priority,
        )
    if not is_valid_todo_type(parent.type):
        raise ParameterError(
            f"invalid parent type '{parent.type}'",
            field="parent.type",
            value=parent.type,
        )

    for i, child in enumerate(children):
        if not is_valid_priority(child.priority):
            raise ParameterError(
                f"invalid priority '{child.priority}' for child {i}",
                field=f"children[{i}].priority",
                value=child.priority,
                index=i,
            )
        if not is_valid_todo_type(child.type):
            raise ParameterError(
                f"invalid type '{child.type}' for child {i}",
                field=f"children[{i}].type",
                value=child.type,
                index=i,
            )
        if child.type == MULTI_PHASE:
            raise ParameterError(
                f"child {i} cannot be of type '{MULTI_PHASE}'",
                field=f"children[{i}].type",
                value=child.type,
                index=i,
            )

    return CreateMultiParams(parent=parent, children=tuple(children))


def extract_read_params(arguments: Optional[Mapping[str, Any]]) -> ReadParams:
    """
    Extract and validate todo_read parameters

    The priority inside ``filter`` is passed through unchecked so callers can
    use values such as ``all``.
    """
    args = _arguments(arguments)

    todo_id = get_str(args, "id") or ""

    todo_filter = TodoFilter()
    filter_obj = get_mapping(args, "filter")
    if filter_obj is not None:
        days = get_int(filter_obj, "days")
        todo_filter = TodoFilter(
            status=get_str(filter_obj, "status") or "",
            priority=get_str(filter_obj, "priority") or "",
            days=days if days is not None else 0,
        )

    output_format = get_str(args, "format")
    if output_format is None:
        output_format = "summary"
    if not is_valid_format(output_format):
        raise _enum_error(FORMAT, output_format)

    return ReadParams(id=todo_id, filter=todo_filter, format=output_format)


def extract_update_params(arguments: Optional[Mapping[str, Any]]) -> UpdateParams:
    """Extract and validate todo_update parameters."""
    args = _arguments(arguments)

    todo_id = _require_str(args, "id")

    # Any section name is accepted
    section = get_str(args, "section") or ""

    operation = get_str(args, "operation")
    if operation is None:
        operation = "append"
    if not is_valid_operation(operation):
        raise _enum_error(OPERATION, operation)

    content = get_str(args, "content") or ""

    metadata = TodoMetadata()
    metadata_obj = get_mapping(args, "metadata")
    if metadata_obj is not None:
        metadata = TodoMetadata(
            status=get_str(metadata_obj, "status") or "",
            priority=get_str(metadata_obj, "priority") or "",
            current_test=get_str(metadata_obj, "current_test") or "",
        )

    if metadata.priority and not is_valid_priority(metadata.priority):
        raise ParameterError(
            f"invalid priority '{metadata.priority}' in metadata",
            field="metadata.priority",
            value=metadata.priority,
        )

    return UpdateParams(
        id=todo_id,
        section=section,
        operation=operation,
        content=content,
        metadata=metadata,
    )


def extract_search_params(arguments: Optional[Mapping[str, Any]]) -> SearchParams:
    """
    Extract and validate todo_search parameters

    ``query`` must be present but may be empty. Non-string scope entries are
    dropped; an empty scope means every scope. ``limit`` above 100 is clamped,
    zero and negative values pass through.
    """
    args = _arguments(arguments)

    query = get_str(args, "query")
    if query is None:
        raise ParameterError("missing required parameter 'query'", field="query")

    scope = tuple(s for s in (get_sequence(args, "scope") or []) if isinstance(s, str))

    filters = SearchFilters()
    filters_obj = get_mapping(args, "filters")
    if filters_obj is not None:
        filters = SearchFilters(
            status=get_str(filters_obj, "status") or "",
            date_from=get_str(filters_obj, "date_from") or "",
            date_to=get_str(filters_obj, "date_to") or "",
        )

    limit = get_int(args, "limit")
    if limit is None:
        limit = DEFAULT_SEARCH_LIMIT
    elif limit > MAX_SEARCH_LIMIT:
        limit = MAX_SEARCH_LIMIT

    return SearchParams(query=query, scope=scope, filters=filters, limit=limit)


def extract_archive_params(arguments: Optional[Mapping[str, Any]]) -> ArchiveParams:
    """Extract and validate todo_archive parameters."""
    args = _arguments(arguments)

    todo_id = _require_str(args, "id")
    quarter = get_str(args, "quarter") or ""

    return ArchiveParams(id=todo_id, quarter=quarter)


EXTRACTORS: Dict[str, Callable[[Optional[Mapping[str, Any]]], Any]] = {
    "todo_create": extract_create_params,
    "todo_create_multi": extract_create_multi_params,
    "todo_read": extract_read_params,
    "todo_update": extract_update_params,
    "todo_search": extract_search_params,
    "todo_archive": extract_archive_params,
}


def extract_params(tool_name: str, arguments: Optional[Mapping[str, Any]]) -> Any:
    """Run the extractor registered for a tool name."""
    extractor = EXTRACTORS.get(tool_name)
    if extractor is None:
        raise ValueError(f"No parameter extractor for tool {tool_name}")
    return extractor(arguments)
