"""
Stats component - Roster distribution summaries.
"""

from .component import (
    age_breakdown,
    percentage,
    role_breakdown,
    summarize,
    unit_breakdown,
    unit_label,
    unit_type_breakdown,
)
from .models import EMPTY_SUMMARY, UNKNOWN_UNIT_LABEL, BreakdownEntry, StatsSummary

__all__ = [
    # Entry points
    "summarize",
    # Breakdowns
    "age_breakdown",
    "role_breakdown",
    "unit_breakdown",
    "unit_type_breakdown",
    "percentage",
    "unit_label",
    # Models
    "BreakdownEntry",
    "EMPTY_SUMMARY",
    "StatsSummary",
    "UNKNOWN_UNIT_LABEL",
]
