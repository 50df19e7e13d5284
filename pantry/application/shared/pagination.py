"""Pagination helpers для list queries."""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class PaginationDTO:
    """Pagination meta for paged responses."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationDTO":
        total_pages = math.ceil(total / limit) if limit > 0 else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


def resolve_page(page: Optional[int], limit: Optional[int], default_limit: int, max_limit: int) -> tuple[int, int]:
    """Normalize page/limit: page >= 1, 1 <= limit <= max_limit.

    Returns:
        (page, limit)
    """
    page = max(page or 1, 1)
    limit = min(max(limit or default_limit, 1), max_limit)
    return page, limit
