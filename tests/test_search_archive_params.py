"""todo_search and todo_archive parameter admission tests"""

import pytest

from todo_mcp.mcp.base_tool import ParameterError
from todo_mcp.params.extractors import extract_archive_params, extract_search_params
from todo_mcp.params.types import ArchiveParams, SearchFilters, SearchParams


class TestExtractSearchParams:
    def test_defaults(self):
        assert extract_search_params({"query": "login"}) == SearchParams(
            query="login", scope=(), filters=SearchFilters(), limit=20
        )

    @pytest.mark.parametrize("args", [{}, {"query": None}, {"query": 5.0}])
    def test_missing_query(self, args):
        with pytest.raises(ParameterError) as exc_info:
            extract_search_params(args)
        assert exc_info.value.message == "missing required parameter 'query'"

    def test_empty_query_accepted(self):
        assert extract_search_params({"query": ""}).query == ""

    def test_limit_clamped(self):
        assert extract_search_params({"query": "x", "limit": 500.0}).limit == 100

    def test_limit_truncated(self):
        assert extract_search_params({"query": "x", "limit": 15.7}).limit == 15

    def test_limit_boundary(self):
        assert extract_search_params({"query": "x", "limit": 100.0}).limit == 100

    @pytest.mark.parametrize("limit", [0.0, -5.0])
    def test_non_positive_limit_passes_through(self, limit):
        assert extract_search_params({"query": "x", "limit": limit}).limit == int(limit)

    def test_wrong_shape_limit_uses_default(self):
        assert extract_search_params({"query": "x", "limit": "50"}).limit == 20

    def test_scope_keeps_text_entries_in_order(self):
        params = extract_search_params({"query": "x", "scope": ["findings", 3, "task", None]})
        assert params.scope == ("findings", "task")

    def test_scope_without_text_entries_is_empty(self):
        assert extract_search_params({"query": "x", "scope": [1, 2]}).scope == ()

    def test_filters(self):
        params = extract_search_params({
            "query": "x",
            "filters": {"status": "completed", "date_from": "2025-01-01", "date_to": "2025-03-31"},
        })
        assert params.filters == SearchFilters(
            status="completed", date_from="2025-01-01", date_to="2025-03-31"
        )


class TestExtractArchiveParams:
    def test_id_only(self):
        assert extract_archive_params({"id": "todo-1"}) == ArchiveParams(id="todo-1", quarter="")

    def test_quarter_override(self):
        assert extract_archive_params({"id": "todo-1", "quarter": "2025-Q1"}).quarter == "2025-Q1"

    @pytest.mark.parametrize("args", [{}, {"id": ""}, {"quarter": "2025-Q1"}])
    def test_missing_id(self, args):
        with pytest.raises(ParameterError) as exc_info:
            extract_archive_params(args)
        assert exc_info.value.message == "missing required parameter 'id'"
