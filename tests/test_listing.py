"""Unit tests for list query parsing and page metadata."""

import pytest

from account_service.domain.models import ListQuery, PaginatedResult, SortField, SortOrder


class TestListQueryParsing:
    def test_defaults(self):
        query = ListQuery.from_raw()

        assert query.page == 1
        assert query.limit == 10
        assert query.sort_by is SortField.CREATED_AT
        assert query.sort_order is SortOrder.DESC
        assert query.search is None
        assert query.is_active is None

    @pytest.mark.parametrize(
        "raw, expected",
        [(0, 1), (-3, 1), (7, 7), (2_000_000, 1_000_000)],
    )
    def test_page_is_clamped(self, raw, expected):
        assert ListQuery.from_raw(page=raw).page == expected

    @pytest.mark.parametrize("raw, expected", [(0, 1), (-1, 1), (25, 25), (500, 100)])
    def test_limit_is_clamped(self, raw, expected):
        assert ListQuery.from_raw(limit=raw).limit == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("ASC", SortOrder.ASC), ("asc", SortOrder.ASC), ("DESC", SortOrder.DESC), ("sideways", SortOrder.DESC)],
    )
    def test_sort_order(self, raw, expected):
        assert ListQuery.from_raw(sort_order=raw).sort_order is expected

    def test_known_sort_field(self):
        assert ListQuery.from_raw(sort_by="name").sort_by is SortField.NAME
        assert ListQuery.from_raw(sort_by="updatedAt").sort_by is SortField.UPDATED_AT

    def test_unknown_sort_field_falls_back_to_creation_time(self):
        assert ListQuery.from_raw(sort_by="password_hash").sort_by is SortField.CREATED_AT

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("false", False), ("yes", False), ("TRUE", False), ("", False)],
    )
    def test_is_active_only_true_for_literal_true(self, raw, expected):
        assert ListQuery.from_raw(is_active=raw).is_active is expected

    def test_blank_search_is_ignored(self):
        assert ListQuery.from_raw(search="   ").search is None

    def test_search_term_is_kept_verbatim(self):
        assert ListQuery.from_raw(search=" 05").search == " 05"

    def test_offset(self):
        assert ListQuery.from_raw(page=3, limit=5).offset == 10


class TestPaginatedResult:
    def test_first_page_of_many(self):
        result = PaginatedResult.build(list(range(10)), 16, ListQuery(page=1, limit=10))

        assert result.meta.total_items == 16
        assert result.meta.item_count == 10
        assert result.meta.items_per_page == 10
        assert result.meta.total_pages == 2
        assert result.meta.current_page == 1
        assert result.meta.has_next is True
        assert result.meta.has_previous is False

    def test_last_page(self):
        result = PaginatedResult.build(list(range(6)), 16, ListQuery(page=2, limit=10))

        assert result.meta.has_next is False
        assert result.meta.has_previous is True

    def test_out_of_range_page_reports_flags_from_requested_page(self):
        result = PaginatedResult.build([], 16, ListQuery(page=5, limit=10))

        assert result.meta.item_count == 0
        assert result.meta.total_pages == 2
        assert result.meta.current_page == 5
        assert result.meta.has_next is False
        assert result.meta.has_previous is True

    def test_empty_store(self):
        result = PaginatedResult.build([], 0, ListQuery())

        assert result.meta.total_pages == 0
        assert result.meta.has_next is False
        assert result.meta.has_previous is False
