"""
Pagination component - Fixed-size page slicing.
"""

from .component import clamp_page, paginate, total_pages_for
from .models import Page

__all__ = [
    "clamp_page",
    "paginate",
    "total_pages_for",
    "Page",
]
