"""
Roster component unit tests.

Covers transitions, page reset/clamping and the derived view.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from src.adapters.clock import FixedClock
from src.components.filtering import FilterCriteria
from src.components.roster import (
    RosterController,
    RosterState,
    derive_view,
    reload,
    set_page,
    set_search,
    toggle_sort,
)
from src.components.sorting import SortDirection, SortField, SortSpec
from src.domain.entities import (
    AgeBracket,
    MemberRecord,
    MemberRole,
    OrganizationUnit,
)

NOW = datetime(2024, 6, 15, 10, 0)

UNIT = OrganizationUnit(id="u1", name="Sede")


def make_member(
    n: int,
    role: MemberRole = MemberRole.MEMBER,
    name: str | None = None,
) -> MemberRecord:
    return MemberRecord(
        id=str(n),
        name=name or f"Person {n:02d}",
        birth_date=date(1990, 1, 1),
        role=role,
        unit=UNIT,
    )


class MockMemberSource:
    """In-memory record source for testing."""

    def __init__(self, records: list[MemberRecord]) -> None:
        self.records = records
        self.loads = 0

    def load(self) -> list[MemberRecord]:
        self.loads += 1
        return list(self.records)


@pytest.fixture
def congregation() -> list[MemberRecord]:
    roles = (
        [MemberRole.MEMBER] * 13 + [MemberRole.LEADER] * 7 + [MemberRole.PASTOR] * 5
    )
    return [make_member(i, role) for i, role in enumerate(roles)]


@pytest.fixture
def controller(congregation: list[MemberRecord]) -> RosterController:
    return RosterController(FixedClock(NOW), congregation, page_size=12)


class TestPureTransitions:
    """Transitions return new state and leave the old one untouched."""

    def test_set_search_resets_page(self) -> None:
        state = RosterState(current_page=3)
        new_state = set_search(state, "silva")
        assert new_state.current_page == 1
        assert new_state.criteria.search == "silva"
        assert state.current_page == 3

    def test_toggle_sort_does_not_reset_page(self) -> None:
        state = RosterState(current_page=2)
        assert toggle_sort(state, SortField.ROLE).current_page == 2

    def test_reload_resets_page(self) -> None:
        state = RosterState(current_page=2)
        new_state = reload(state, [make_member(1)])
        assert new_state.current_page == 1
        assert len(new_state.records) == 1

    def test_derive_view_clamps_page(self) -> None:
        state = set_page(RosterState(records=(make_member(1),)), 7)
        view = derive_view(state, NOW)
        assert view.current_page == 1
        assert view.visible_page.items == (make_member(1),)


class TestController:
    """Test the stateful controller."""

    def test_initial_view(self, controller: RosterController) -> None:
        view = controller.view()
        assert view.total_pages == 3
        assert view.total_count == 25
        assert len(view.visible_page.items) == 12
        assert view.full_set_stats.most_common_role == "Member"
        assert [(e.label, e.count, e.percentage) for e in view.full_set_stats.role_breakdown] == [
            ("Member", 13, 52.0),
            ("Leader", 7, 28.0),
            ("Pastor", 5, 20.0),
        ]

    @pytest.mark.parametrize(
        "change",
        [
            lambda c: c.set_search("person"),
            lambda c: c.set_role_filter(MemberRole.MEMBER),
            lambda c: c.set_unit_filter("u1"),
            lambda c: c.set_age_bracket_filter(AgeBracket.FROM_30_TO_49),
            lambda c: c.clear_filters(),
        ],
    )
    def test_filter_change_resets_page(self, controller: RosterController, change) -> None:
        controller.set_page(3)
        change(controller)
        assert controller.state.current_page == 1

    def test_page_clamped_after_filter_narrows(self, controller: RosterController) -> None:
        controller.set_page(3)
        controller.set_role_filter(MemberRole.PASTOR)
        controller.set_page(3)
        view = controller.view()
        assert view.total_pages == 1
        assert view.current_page == 1
        assert len(view.visible_page.items) == 5

    def test_stats_ignore_filters(self, controller: RosterController) -> None:
        controller.set_role_filter(MemberRole.PASTOR)
        view = controller.view()
        assert view.total_count == 5
        assert view.full_set_stats.total == 25

    def test_no_matches(self, controller: RosterController) -> None:
        controller.set_search("nobody")
        view = controller.view()
        assert view.total_pages == 1
        assert view.visible_page.items == ()
        assert view.criteria == FilterCriteria(search="nobody")

    def test_toggle_sort_twice_restores_ascending(
        self, controller: RosterController
    ) -> None:
        initial = controller.export_rows()
        controller.toggle_sort(SortField.NAME)
        assert controller.view().sort == SortSpec(SortField.NAME, SortDirection.DESC)
        assert controller.export_rows() == tuple(reversed(initial))
        controller.toggle_sort(SortField.NAME)
        assert controller.export_rows() == initial

    def test_export_rows_is_unpaginated(self, controller: RosterController) -> None:
        controller.set_role_filter(MemberRole.MEMBER)
        rows = controller.export_rows()
        assert len(rows) == 13
        assert all(r.role == MemberRole.MEMBER for r in rows)

    def test_refresh_from_source(self, controller: RosterController) -> None:
        source = MockMemberSource([make_member(100, name="Maria Silva")])
        controller.set_page(2)
        count = controller.refresh(source)

        assert count == 1
        assert source.loads == 1
        assert controller.state.current_page == 1
        assert controller.view().full_set_stats.total == 1

    def test_initial_sort(self, congregation: list[MemberRecord]) -> None:
        spec = SortSpec(SortField.ROLE, SortDirection.DESC)
        controller = RosterController(FixedClock(NOW), congregation, initial_sort=spec)
        assert controller.view().visible_page.items[0].role == MemberRole.PASTOR

    def test_invalid_page_size(self) -> None:
        with pytest.raises(ValueError):
            RosterController(FixedClock(NOW), page_size=0)
