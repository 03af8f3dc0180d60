"""
Stats component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_UNIT_LABEL = "unknown"


@dataclass(frozen=True)
class BreakdownEntry:
    """One (category, count, percentage) row of a breakdown."""

    label: str
    count: int
    percentage: float


@dataclass(frozen=True)
class StatsSummary:
    """Distribution summary of a record set."""

    total: int
    role_breakdown: tuple[BreakdownEntry, ...]
    age_breakdown: tuple[BreakdownEntry, ...]
    unit_breakdown: tuple[BreakdownEntry, ...]
    unit_type_breakdown: tuple[BreakdownEntry, ...]
    mean_age: float
    most_common_role: str


EMPTY_SUMMARY = StatsSummary(
    total=0,
    role_breakdown=(),
    age_breakdown=(),
    unit_breakdown=(),
    unit_type_breakdown=(),
    mean_age=0.0,
    most_common_role="",
)
