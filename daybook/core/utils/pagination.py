"""Pagination helper for SQLAlchemy queries."""

from __future__ import annotations

from typing import Any, List, Tuple

from sqlalchemy.orm import Query


def clamp_page(page: int, page_size: int) -> Tuple[int, int]:
    return max(page or 1, 1), max(page_size or 1, 1)


def paginate(query: Query, page: int = 1, page_size: int = 10) -> Tuple[List[Any], int]:
    """Return one page of ``query`` plus the total match count.

    The total is computed on the unordered query before slicing, so it does
    not depend on the page or page size.
    """
    page, page_size = clamp_page(page, page_size)
    total = query.order_by(None).count()
    items = query.limit(page_size).offset((page - 1) * page_size).all()
    return items, total


def page_count(total: int, page_size: int) -> int:
    return (total + page_size - 1) // page_size if page_size else 1
