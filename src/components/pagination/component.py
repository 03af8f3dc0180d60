"""
Pagination component - Fixed-size page slicing.

Functional Core - pure functions.

The requested page number is never clamped here. A page outside
[1, total_pages] yields an empty slice; clamping is the caller's policy.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from .models import Page

T = TypeVar("T")


def total_pages_for(total_count: int, page_size: int) -> int:
    """Number of pages, never less than one."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(total_count / page_size))


def clamp_page(page_number: int, total_pages: int) -> int:
    return min(max(page_number, 1), max(total_pages, 1))


def paginate(items: Sequence[T], page_number: int, page_size: int) -> Page[T]:
    """Slice items into the requested page."""
    total_count = len(items)
    total_pages = total_pages_for(total_count, page_size)

    if page_number < 1:
        sliced: tuple[T, ...] = ()
    else:
        start = (page_number - 1) * page_size
        sliced = tuple(items[start : start + page_size])

    return Page(
        items=sliced,
        page_number=page_number,
        page_size=page_size,
        total_pages=total_pages,
        total_count=total_count,
    )
