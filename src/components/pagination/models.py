"""
Pagination component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One fixed-size slice of a sequence plus its metadata."""

    items: tuple[T, ...]
    page_number: int
    page_size: int
    total_pages: int
    total_count: int

    @property
    def has_previous(self) -> bool:
        return 1 < self.page_number <= self.total_pages

    @property
    def has_next(self) -> bool:
        return 1 <= self.page_number < self.total_pages

    @property
    def start_index(self) -> int:
        """1-based position of the first item, 0 when the slice is empty."""
        if not self.items:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        if not self.items:
            return 0
        return self.start_index + len(self.items) - 1
