from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


def parse_positive_int(value: Any, default: int) -> int:
    """Coerce untyped query input to an int >= 1, else ``default``."""
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


@dataclass
class Page(Generic[T]):
    items: list[T]
    page: int
    limit: int
    total: int

    @property
    def start(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def end(self) -> int:
        return self.start + self.limit

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.end < self.total

    @property
    def has_prev(self) -> bool:
        return self.start > 0

    def metadata(self) -> dict[str, Any]:
        return {
            "currentPage": self.page,
            "totalPages": self.total_pages,
            "totalJobs": self.total,
            "jobsPerPage": self.limit,
            "hasNextPage": self.has_next,
            "hasPrevPage": self.has_prev,
        }


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be >= 1")
    start = (page - 1) * limit
    return Page(items=list(items[start:start + limit]), page=page, limit=limit, total=len(items))
