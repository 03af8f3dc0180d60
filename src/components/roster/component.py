"""
Roster component - Members roster view controller.

Shell Layer - holds the single RosterState, reads the clock, and talks to
the record source. All computation is delegated to the functional core in
_impl.

Execution is synchronous. When reloads overlap, the last completed one
wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.components.sorting import SortField, SortSpec
from src.components.stats import UNKNOWN_UNIT_LABEL
from src.domain.entities import AgeBracket, MemberRecord, MemberRole

from . import _impl
from .models import DEFAULT_PAGE_SIZE, RosterState, RosterView
from .ports import ClockPort, MemberSourcePort

logger = logging.getLogger(__name__)


class RosterController:
    """
    Members roster view controller.

    State changes only through the named transitions below. Derived
    values (visible page, stats) are recomputed on every read.
    """

    def __init__(
        self,
        clock: ClockPort,
        records: Iterable[MemberRecord] = (),
        page_size: int = DEFAULT_PAGE_SIZE,
        unknown_unit_label: str = UNKNOWN_UNIT_LABEL,
        initial_sort: SortSpec | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._clock = clock
        self._unknown_unit_label = unknown_unit_label
        self._state = RosterState(records=tuple(records), page_size=page_size)
        if initial_sort is not None:
            self._state = _impl.set_sort(self._state, initial_sort)

    @property
    def state(self) -> RosterState:
        return self._state

    # --- Transitions ---

    def set_search(self, text: str) -> None:
        self._state = _impl.set_search(self._state, text)

    def set_role_filter(self, role: MemberRole | None) -> None:
        self._state = _impl.set_role_filter(self._state, role)

    def set_unit_filter(self, unit_id: str | None) -> None:
        self._state = _impl.set_unit_filter(self._state, unit_id)

    def set_age_bracket_filter(self, bracket: AgeBracket | None) -> None:
        self._state = _impl.set_age_bracket_filter(self._state, bracket)

    def clear_filters(self) -> None:
        self._state = _impl.clear_filters(self._state)

    def toggle_sort(self, field: SortField) -> None:
        self._state = _impl.toggle_sort(self._state, field)

    def set_sort(self, spec: SortSpec) -> None:
        self._state = _impl.set_sort(self._state, spec)

    def set_page(self, page_number: int) -> None:
        self._state = _impl.set_page(self._state, page_number)

    def reload(self, records: Iterable[MemberRecord]) -> None:
        """Replace the snapshot after a create/edit/delete round-trip."""
        self._state = _impl.reload(self._state, records)
        logger.info("Roster snapshot reloaded with %d records", len(self._state.records))

    def refresh(self, source: MemberSourcePort) -> int:
        """Load a fresh snapshot from the record source."""
        records = source.load()
        self.reload(records)
        return len(records)

    # --- Derived ---

    def view(self) -> RosterView:
        return _impl.derive_view(
            self._state,
            self._clock.now(),
            self._unknown_unit_label,
        )

    def export_rows(self) -> tuple[MemberRecord, ...]:
        """Full filtered and sorted rows for the report export."""
        return _impl.derive_ordered(self._state, self._clock.now())
