import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class PageMeta:
    page: int
    limit: int
    total: int
    total_page: int


@dataclass
class Page(Generic[T]):
    """One page of results plus the counts needed to render pagination."""
    data: List[T] = field(default_factory=list)
    meta: PageMeta = None


def normalize_page(page: int, limit: int, default_limit: int = 10) -> tuple:
    """Clamp page/limit to positive values; falsy values fall back to defaults."""
    page = page if page and page > 0 else 1
    limit = limit if limit and limit > 0 else default_limit
    return page, limit


def skip_for(page: int, limit: int) -> int:
    return (page - 1) * limit


def build_meta(page: int, limit: int, total: int) -> PageMeta:
    return PageMeta(
        page=page,
        limit=limit,
        total=total,
        total_page=math.ceil(total / limit) if limit else 0,
    )
