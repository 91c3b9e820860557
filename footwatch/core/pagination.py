"""
Pagination rules.

Out-of-range paging parameters are clamped to the nearest valid bound,
never rejected.

Dependencies: None (pure domain layer)
System role: Shared paging bounds for list surfaces
"""

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# Sample grids can be 64x64; this page bound is independent of the general one
SAMPLE_DEFAULT_LIMIT = 100
SAMPLE_MAX_LIMIT = 500


@dataclass(frozen=True)
class PageRequest:
    """Clamped limit/offset pair."""

    limit: int
    offset: int


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of records plus the unpaged total."""

    items: Sequence[T]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total


def clamp_page(
    limit: int | None,
    offset: int | None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PageRequest:
    """
    Clamp raw paging parameters.

    Args:
        limit: Requested page size (None for default)
        offset: Requested offset (None for 0)
        default_limit: Page size when none is given
        max_limit: Upper bound on page size

    Returns:
        PageRequest: limit in [1, max_limit], offset >= 0

    Usage:
        clamp_page(1000, -5)  # PageRequest(limit=100, offset=0)
    """
    if limit is None:
        limit = default_limit
    if offset is None:
        offset = 0
    return PageRequest(limit=max(1, min(limit, max_limit)), offset=max(0, offset))


def clamp_sample_page(limit: int | None, offset: int | None) -> PageRequest:
    """Clamp paging for per-session sample listing."""
    return clamp_page(limit, offset, SAMPLE_DEFAULT_LIMIT, SAMPLE_MAX_LIMIT)
