"""
Filtering component - Roster record filtering.
"""

from .component import apply_filter, matches
from .models import NO_FILTER, FilterCriteria

__all__ = [
    # Entry points
    "apply_filter",
    "matches",
    # Models
    "FilterCriteria",
    "NO_FILTER",
]
