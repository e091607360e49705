"""Cross-extractor properties: registry dispatch, idempotence, round trips"""

import copy

import pytest

from todo_mcp.params.extractors import EXTRACTORS, extract_params
from todo_mcp.params.validators import is_valid_priority, is_valid_todo_type

SAMPLE_ARGUMENTS = {
    "todo_create": {"task": "Phase 1", "type": "phase", "parent_id": "proj-1", "priority": "low"},
    "todo_create_multi": {
        "parent": {"task": "Project", "priority": "medium"},
        "children": [{"task": "Phase 1"}, {"task": "Phase 2", "type": "subtask", "priority": "high"}],
    },
    "todo_read": {"filter": {"status": "in_progress", "priority": "all", "days": 7.0}, "format": "list"},
    "todo_update": {
        "id": "todo-1",
        "section": "findings",
        "operation": "toggle",
        "content": "- [x] done",
        "metadata": {"status": "in_progress", "priority": "medium", "current_test": "test_a"},
    },
    "todo_search": {"query": "login", "scope": ["task", 7], "filters": {"status": "open"}, "limit": 250.0},
    "todo_archive": {"id": "todo-1", "quarter": "2025-Q2"},
}


class TestRegistry:
    def test_tool_names(self):
        assert set(EXTRACTORS) == {
            "todo_create",
            "todo_create_multi",
            "todo_read",
            "todo_update",
            "todo_search",
            "todo_archive",
        }

    def test_unknown_tool(self):
        with pytest.raises(ValueError):
            extract_params("todo_explode", {})


@pytest.mark.parametrize("tool_name", sorted(SAMPLE_ARGUMENTS))
class TestProperties:
    def test_idempotent(self, tool_name):
        args = SAMPLE_ARGUMENTS[tool_name]
        assert extract_params(tool_name, args) == extract_params(tool_name, args)

    def test_arguments_not_mutated(self, tool_name):
        args = copy.deepcopy(SAMPLE_ARGUMENTS[tool_name])
        extract_params(tool_name, args)
        assert args == SAMPLE_ARGUMENTS[tool_name]

    def test_round_trip(self, tool_name):
        """Writing a record back to arguments and re-extracting gives the same record"""
        record = extract_params(tool_name, SAMPLE_ARGUMENTS[tool_name])
        assert extract_params(tool_name, record.to_arguments()) == record


def test_create_multi_invariants():
    params = extract_params("todo_create_multi", SAMPLE_ARGUMENTS["todo_create_multi"])

    assert len(params.children) >= 1
    for info in (params.parent, *params.children):
        assert is_valid_priority(info.priority)
        assert is_valid_todo_type(info.type)
    assert all(child.type != "multi-phase" for child in params.children)


def test_records_are_frozen():
    params = extract_params("todo_archive", {"id": "todo-1"})
    with pytest.raises(AttributeError):
        params.id = "other"
