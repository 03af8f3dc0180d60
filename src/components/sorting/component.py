"""
Sorting component - Typed roster ordering.

Functional Core - pure functions.

Each SortField maps to one key extractor; there is no generic comparator.
Role sorts by its raw tag, not by any rank.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date

from src.domain.entities import MemberRecord

from .models import SortDirection, SortField, SortSpec


def _name_key(record: MemberRecord) -> str:
    return record.name.lower()


def _birth_date_key(record: MemberRecord) -> date:
    return record.birth_date


def _role_key(record: MemberRecord) -> str:
    return record.role.value


def _unit_name_key(record: MemberRecord) -> str:
    return record.unit_name


KEY_EXTRACTORS: dict[SortField, Callable[[MemberRecord], str | date]] = {
    SortField.NAME: _name_key,
    SortField.BIRTH_DATE: _birth_date_key,
    SortField.ROLE: _role_key,
    SortField.UNIT_NAME: _unit_name_key,
}


def apply_sort(
    records: Iterable[MemberRecord],
    spec: SortSpec,
) -> tuple[MemberRecord, ...]:
    """Order records by the spec's field and direction."""
    key = KEY_EXTRACTORS[spec.field]
    return tuple(sorted(records, key=key, reverse=spec.descending))


def toggle(spec: SortSpec, field: SortField) -> SortSpec:
    """
    Header-click policy.

    Same field flips the direction; a different field starts ascending.
    """
    if spec.field == field:
        flipped = (
            SortDirection.ASC if spec.descending else SortDirection.DESC
        )
        return SortSpec(field=field, direction=flipped)
    return SortSpec(field=field, direction=SortDirection.ASC)
