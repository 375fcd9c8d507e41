"""Paginated, filtered and sorted product listing queries.

The builders return plain SQL plus a dict of bound parameters named ``p1``,
``p2``, ... in the order they appear. Only the search term and the paging
numbers come from the request, and they are always bound; the ORDER BY
identifier is picked from ``SORT_COLUMNS`` and never copied from input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

from catalog_demo.entities.service.product.entity import Product

SORT_COLUMNS = ("id", "name", "category", "price", "status", "quantity", "last_checked")
SELECT_COLUMNS = "id, name, category, price, status, quantity, last_checked"
DEFAULT_SORT_COLUMN = "id"


def _parse_page(raw: Any) -> int:
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return max(page, 1)


@dataclass(frozen=True)
class ProductQuery:
    page: int = 1
    limit: int = 20
    search: str = ""
    sort_by: str = DEFAULT_SORT_COLUMN
    sort_order: str = "asc"

    @classmethod
    def from_params(
        cls,
        page: Any = None,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        limit: int = 20,
    ) -> ProductQuery:
        """Build a query from raw query-string values.

        Unparseable or non-positive pages become 1 and the search term is trimmed.
        Sort values are kept verbatim so they can be echoed back; the SQL only
        ever sees ``safe_column`` and ``safe_order``.
        """
        return cls(
            page=_parse_page(page),
            limit=max(int(limit), 1),
            search=(search or "").strip(),
            sort_by=sort_by or DEFAULT_SORT_COLUMN,
            sort_order=sort_order or "asc",
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def safe_column(self) -> str:
        return self.sort_by if self.sort_by in SORT_COLUMNS else DEFAULT_SORT_COLUMN

    @property
    def safe_order(self) -> str:
        return "DESC" if self.sort_order == "desc" else "ASC"

    @property
    def search_pattern(self) -> str:
        """Wrap the term in % so "laptop" matches "Gaming Laptop"."""
        return f"%{self.search}%"

    def _where(self, dialect: str) -> tuple[str, dict[str, Any]]:
        if not self.search:
            return "", {}
        # ILIKE is PostgreSQL only
        if dialect == "postgresql":
            return " WHERE name ILIKE :p1", {"p1": self.search_pattern}
        return " WHERE LOWER(name) LIKE LOWER(:p1)", {"p1": self.search_pattern}

    def build_count_query(self, dialect: str = "postgresql") -> tuple[str, dict[str, Any]]:
        where, params = self._where(dialect)
        return f"SELECT COUNT(*) FROM products{where}", params

    def build_select_query(self, dialect: str = "postgresql") -> tuple[str, dict[str, Any]]:
        where, params = self._where(dialect)

        limit_param = f"p{len(params) + 1}"
        offset_param = f"p{len(params) + 2}"
        sql = (
            f"SELECT {SELECT_COLUMNS} FROM products{where}"
            f" ORDER BY {self.safe_column} {self.safe_order}"
            f" LIMIT :{limit_param} OFFSET :{offset_param}"
        )
        return sql, {**params, limit_param: self.limit, offset_param: self.offset}

    # Link helpers for the listing page

    def to_params(self) -> dict[str, str]:
        params = {"page": str(self.page)}
        if self.search:
            params["search"] = self.search
        params["sortBy"] = self.sort_by
        params["sortOrder"] = self.sort_order
        return params

    def with_page(self, page: int) -> ProductQuery:
        return replace(self, page=max(page, 1))

    def sorted_by(self, column: str) -> ProductQuery:
        """Sort by ``column``: toggles the order on the active column, else ascending. Resets to page 1."""
        if column == self.sort_by:
            order = "desc" if self.sort_order == "asc" else "asc"
        else:
            order = "asc"
        return replace(self, page=1, sort_by=column, sort_order=order)

    def without_search(self) -> ProductQuery:
        return replace(self, page=1, search="")


@dataclass
class ProductPage:
    products: list[Product] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    limit: int = 20

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit) if self.limit else 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
