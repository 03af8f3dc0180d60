"""
Filtering component - Roster record filtering.

Functional Core - pure functions.

Invariants:
- Output is a subset of the input in original relative order
- Clauses are ANDed; an empty clause always passes
- Name search is case-insensitive, national id search is a raw substring
- Search text is used as typed; only the empty string skips the clause
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from src.components.ages import bracket_on
from src.domain.entities import MemberRecord

from .models import FilterCriteria


def _matches_search(record: MemberRecord, text: str) -> bool:
    if not text:
        return True
    return text.lower() in record.name.lower() or text in record.national_id


def matches(record: MemberRecord, criteria: FilterCriteria, now: date) -> bool:
    """Check a single record against every clause of the criteria."""
    if not _matches_search(record, criteria.search):
        return False

    if criteria.role is not None and record.role != criteria.role:
        return False

    if criteria.unit_id:
        if record.unit is None or record.unit.id != criteria.unit_id:
            return False

    if criteria.age_bracket is not None:
        if bracket_on(record.birth_date, now) != criteria.age_bracket:
            return False

    return True


def apply_filter(
    records: Iterable[MemberRecord],
    criteria: FilterCriteria,
    now: date,
) -> tuple[MemberRecord, ...]:
    """Return the records matching criteria, preserving order."""
    if criteria.is_empty:
        return tuple(records)
    return tuple(r for r in records if matches(r, criteria, now))
