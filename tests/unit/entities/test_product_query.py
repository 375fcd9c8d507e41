"""Unit tests for the product listing query builder."""

import pytest

from catalog_demo.entities.service.product import SORT_COLUMNS, ProductPage, ProductQuery


class TestFromParams:
    @pytest.mark.parametrize("raw", [None, "", "abc", "0", "-3", "1.5"])
    def test_invalid_page_becomes_first_page(self, raw):
        """Unparseable or non-positive pages fall back to page 1."""
        assert ProductQuery.from_params(page=raw).page == 1

    def test_page_and_offset(self):
        query = ProductQuery.from_params(page="3", limit=20)

        assert query.page == 3
        assert query.offset == 40

    def test_search_is_trimmed(self):
        assert ProductQuery.from_params(search="  laptop ").search == "laptop"

    def test_defaults(self):
        query = ProductQuery.from_params()

        assert query.sort_by == "id"
        assert query.sort_order == "asc"
        assert query.search == ""
        assert query.limit == 20


class TestSortWhitelist:
    @pytest.mark.parametrize("column", SORT_COLUMNS)
    def test_known_columns_are_used(self, column):
        assert ProductQuery(sort_by=column).safe_column == column

    @pytest.mark.parametrize(
        "column", ["password", "name; DROP TABLE products", "Name", "lastChecked"]
    )
    def test_unknown_columns_fall_back_to_id(self, column):
        """Anything outside the whitelist sorts by id."""
        sql, _ = ProductQuery(sort_by=column).build_select_query()

        assert " ORDER BY id ASC " in sql
        assert "DROP" not in sql

    @pytest.mark.parametrize(
        ("order", "expected"),
        [("desc", "DESC"), ("asc", "ASC"), ("DESC", "ASC"), ("sideways", "ASC"), ("", "ASC")],
    )
    def test_order_is_desc_only_for_exact_desc(self, order, expected):
        assert ProductQuery(sort_order=order).safe_order == expected


class TestBuildQueries:
    def test_select_without_search(self):
        """Without a search term the only parameters are limit and offset."""
        sql, params = ProductQuery(page=2, limit=20, sort_by="price", sort_order="desc").build_select_query()

        assert sql == (
            "SELECT id, name, category, price, status, quantity, last_checked FROM products"
            " ORDER BY price DESC LIMIT :p1 OFFSET :p2"
        )
        assert params == {"p1": 20, "p2": 20}

    def test_select_with_search(self):
        """The search pattern is bound first, then limit and offset."""
        sql, params = ProductQuery(search="laptop").build_select_query()

        assert " WHERE name ILIKE :p1 " in sql
        assert sql.endswith("LIMIT :p2 OFFSET :p3")
        assert params == {"p1": "%laptop%", "p2": 20, "p3": 0}

    def test_search_term_is_never_interpolated(self):
        term = "x' OR '1'='1"
        sql, params = ProductQuery(search=term).build_select_query()
        count_sql, count_params = ProductQuery(search=term).build_count_query()

        assert term not in sql
        assert term not in count_sql
        assert params["p1"] == count_params["p1"] == f"%{term}%"

    def test_count_query_shares_the_filter(self):
        assert ProductQuery().build_count_query() == ("SELECT COUNT(*) FROM products", {})
        assert ProductQuery(search="hub").build_count_query() == (
            "SELECT COUNT(*) FROM products WHERE name ILIKE :p1",
            {"p1": "%hub%"},
        )

    def test_non_postgres_dialect_uses_lower_like(self):
        sql, _ = ProductQuery(search="Hub").build_count_query("sqlite")
        assert sql == "SELECT COUNT(*) FROM products WHERE LOWER(name) LIKE LOWER(:p1)"


class TestLinkHelpers:
    def test_to_params(self):
        query = ProductQuery(page=2, search="desk", sort_by="name", sort_order="desc")

        assert query.to_params() == {
            "page": "2",
            "search": "desk",
            "sortBy": "name",
            "sortOrder": "desc",
        }

    def test_search_omitted_when_empty(self):
        assert "search" not in ProductQuery().to_params()

    def test_sorted_by_toggles_active_column(self):
        query = ProductQuery(page=4, sort_by="price", sort_order="asc")

        toggled = query.sorted_by("price")
        assert (toggled.sort_by, toggled.sort_order, toggled.page) == ("price", "desc", 1)
        assert toggled.sorted_by("price").sort_order == "asc"

    def test_sorted_by_new_column_starts_ascending(self):
        query = ProductQuery(sort_by="price", sort_order="desc")
        assert query.sorted_by("name").sort_order == "asc"

    def test_with_page_and_without_search(self):
        query = ProductQuery(page=3, search="cable")

        assert query.with_page(0).page == 1
        assert query.with_page(5).page == 5
        cleared = query.without_search()
        assert (cleared.search, cleared.page) == ("", 1)


class TestProductPage:
    @pytest.mark.parametrize(
        ("total", "pages"), [(0, 0), (1, 1), (20, 1), (21, 2), (45, 3)]
    )
    def test_total_pages(self, total, pages):
        assert ProductPage(total_count=total, limit=20).total_pages == pages

    def test_navigation_flags(self):
        page = ProductPage(total_count=45, page=2, limit=20)

        assert page.has_previous is True
        assert page.has_next is True
        assert ProductPage(total_count=45, page=3, limit=20).has_next is False
