"""
Sorting component - Typed roster ordering.
"""

from .component import KEY_EXTRACTORS, apply_sort, toggle
from .models import DEFAULT_SORT, SortDirection, SortField, SortSpec

__all__ = [
    # Entry points
    "apply_sort",
    "toggle",
    "KEY_EXTRACTORS",
    # Models
    "DEFAULT_SORT",
    "SortDirection",
    "SortField",
    "SortSpec",
]
