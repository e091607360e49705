"""Field reader tests"""

import math

from todo_mcp.params.coercion import get_int, get_mapping, get_sequence, get_str


class TestGetStr:
    def test_present(self):
        assert get_str({"task": "Write docs"}, "task") == "Write docs"

    def test_empty_string_is_returned(self):
        assert get_str({"task": ""}, "task") == ""

    def test_absent_and_wrong_shape(self):
        assert get_str({}, "task") is None
        assert get_str({"task": None}, "task") is None
        assert get_str({"task": 42.0}, "task") is None
        assert get_str({"task": ["a"]}, "task") is None


class TestGetInt:
    def test_float_truncates_toward_zero(self):
        assert get_int({"n": 7.0}, "n") == 7
        assert get_int({"n": 7.9}, "n") == 7
        assert get_int({"n": -2.7}, "n") == -2

    def test_int_passes_through(self):
        assert get_int({"n": 3}, "n") == 3

    def test_non_numbers(self):
        assert get_int({"n": "7"}, "n") is None
        assert get_int({"n": True}, "n") is None
        assert get_int({"n": math.inf}, "n") is None
        assert get_int({"n": math.nan}, "n") is None
        assert get_int({}, "n") is None


class TestGetMappingAndSequence:
    def test_mapping(self):
        assert get_mapping({"filter": {"status": "done"}}, "filter") == {"status": "done"}
        assert get_mapping({"filter": "done"}, "filter") is None
        assert get_mapping({"filter": ["done"]}, "filter") is None

    def test_sequence(self):
        assert get_sequence({"scope": ["task", 1]}, "scope") == ["task", 1]
        assert get_sequence({"scope": ("task",)}, "scope") == ["task"]
        assert get_sequence({"scope": "task"}, "scope") is None
        assert get_sequence({"scope": {"a": 1}}, "scope") is None
