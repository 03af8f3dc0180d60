"""
Stats component - Roster distribution summaries.

Functional Core - pure functions, deterministic given `now`.

Invariants:
- Only categories with count > 0 appear in a breakdown
- Percentages are 100 * count / total and sum to 100
- Empty input yields zeros, never a division error
- Role and unit breakdowns are ordered by count (stable); age by bracket
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date

from src.components.ages import age_on, bracket_for
from src.domain.entities import AgeBracket, MemberRecord, MemberRole, UnitType

from .models import EMPTY_SUMMARY, UNKNOWN_UNIT_LABEL, BreakdownEntry, StatsSummary

# --- Helpers ---


def percentage(count: int, total: int) -> float:
    """Share of total in percent; 0 for an empty total."""
    if total <= 0:
        return 0.0
    return 100.0 * count / total


def _entries(
    counts: Iterable[tuple[str, int]],
    total: int,
) -> list[BreakdownEntry]:
    return [
        BreakdownEntry(label=label, count=count, percentage=percentage(count, total))
        for label, count in counts
        if count > 0
    ]


def _by_count(entries: list[BreakdownEntry]) -> tuple[BreakdownEntry, ...]:
    # sorted() is stable, so ties keep their incoming order
    return tuple(sorted(entries, key=lambda e: e.count, reverse=True))


def unit_label(record: MemberRecord, unknown_label: str = UNKNOWN_UNIT_LABEL) -> str:
    """Grouping key for a record's unit."""
    if record.unit is None or not record.unit.name.strip():
        return unknown_label
    return record.unit.name


# --- Breakdowns ---


def role_breakdown(records: Sequence[MemberRecord]) -> tuple[BreakdownEntry, ...]:
    counts = Counter(r.role for r in records)
    entries = _entries(((role.value, counts[role]) for role in MemberRole), len(records))
    return _by_count(entries)


def age_breakdown(
    ages: Sequence[int],
) -> tuple[BreakdownEntry, ...]:
    counts = Counter(bracket_for(a) for a in ages)
    return tuple(
        _entries(((b.value, counts[b]) for b in AgeBracket), len(ages))
    )


def unit_breakdown(
    records: Sequence[MemberRecord],
    unknown_label: str = UNKNOWN_UNIT_LABEL,
) -> tuple[BreakdownEntry, ...]:
    # Counter keeps first-seen insertion order
    counts = Counter(unit_label(r, unknown_label) for r in records)
    return _by_count(_entries(counts.items(), len(records)))


def unit_type_breakdown(records: Sequence[MemberRecord]) -> tuple[BreakdownEntry, ...]:
    """Headquarters vs. branch, over records that have a unit."""
    counts = Counter(r.unit.unit_type for r in records if r.unit is not None)
    total = sum(counts.values())
    return tuple(_entries(((t.value, counts[t]) for t in UnitType), total))


# --- Entry Point ---


def summarize(
    records: Sequence[MemberRecord],
    now: date,
    unknown_unit_label: str = UNKNOWN_UNIT_LABEL,
) -> StatsSummary:
    """
    Summarize a record set.

    Callers pass the full snapshot; this function does not know about
    any active filter.
    """
    if not records:
        return EMPTY_SUMMARY

    ages = [age_on(r.birth_date, now) for r in records]
    roles = role_breakdown(records)

    return StatsSummary(
        total=len(records),
        role_breakdown=roles,
        age_breakdown=age_breakdown(ages),
        unit_breakdown=unit_breakdown(records, unknown_unit_label),
        unit_type_breakdown=unit_type_breakdown(records),
        mean_age=sum(ages) / len(ages),
        most_common_role=roles[0].label if roles else "",
    )
