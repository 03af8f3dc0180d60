"""
Roster state transitions and view derivation.

Functional Core - every transition returns a new RosterState.

Invariants:
- Any filter change resets current_page to 1
- reload replaces the snapshot wholesale and resets current_page to 1
- The derived current page is clamped to [1, total_pages]
- Stats are computed over the full snapshot, never the filtered rows
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import date

from src.components.filtering import NO_FILTER, FilterCriteria, apply_filter
from src.components.pagination import clamp_page, paginate, total_pages_for
from src.components.sorting import SortField, SortSpec, apply_sort, toggle
from src.components.stats import UNKNOWN_UNIT_LABEL, summarize
from src.domain.entities import AgeBracket, MemberRecord, MemberRole

from .models import RosterState, RosterView

# --- Filter Transitions ---


def _with_criteria(state: RosterState, criteria: FilterCriteria) -> RosterState:
    return replace(state, criteria=criteria, current_page=1)


def set_search(state: RosterState, text: str) -> RosterState:
    return _with_criteria(state, replace(state.criteria, search=text))


def set_role_filter(state: RosterState, role: MemberRole | None) -> RosterState:
    return _with_criteria(state, replace(state.criteria, role=role))


def set_unit_filter(state: RosterState, unit_id: str | None) -> RosterState:
    return _with_criteria(state, replace(state.criteria, unit_id=unit_id or None))


def set_age_bracket_filter(
    state: RosterState, bracket: AgeBracket | None
) -> RosterState:
    return _with_criteria(state, replace(state.criteria, age_bracket=bracket))


def clear_filters(state: RosterState) -> RosterState:
    return _with_criteria(state, NO_FILTER)


# --- Sort / Page / Snapshot Transitions ---


def toggle_sort(state: RosterState, field: SortField) -> RosterState:
    return replace(state, sort=toggle(state.sort, field))


def set_sort(state: RosterState, spec: SortSpec) -> RosterState:
    return replace(state, sort=spec)


def set_page(state: RosterState, page_number: int) -> RosterState:
    return replace(state, current_page=page_number)


def reload(state: RosterState, records: Iterable[MemberRecord]) -> RosterState:
    return replace(state, records=tuple(records), current_page=1)


# --- Derivation ---


def derive_ordered(state: RosterState, now: date) -> tuple[MemberRecord, ...]:
    """Full filtered and sorted sequence, unpaginated."""
    return apply_sort(apply_filter(state.records, state.criteria, now), state.sort)


def derive_view(
    state: RosterState,
    now: date,
    unknown_unit_label: str = UNKNOWN_UNIT_LABEL,
) -> RosterView:
    """Recompute the whole view from state."""
    ordered = derive_ordered(state, now)
    total_pages = total_pages_for(len(ordered), state.page_size)
    current_page = clamp_page(state.current_page, total_pages)

    return RosterView(
        visible_page=paginate(ordered, current_page, state.page_size),
        ordered=ordered,
        full_set_stats=summarize(state.records, now, unknown_unit_label),
        criteria=state.criteria,
        sort=state.sort,
        current_page=current_page,
    )
