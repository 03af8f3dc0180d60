"""
Roster component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.components.filtering import NO_FILTER, FilterCriteria
from src.components.pagination import Page
from src.components.sorting import DEFAULT_SORT, SortSpec
from src.components.stats import StatsSummary
from src.domain.entities import MemberRecord

DEFAULT_PAGE_SIZE = 12


@dataclass(frozen=True)
class RosterState:
    """
    Everything the roster view owns.

    `current_page` is stored as requested; `derive_view` clamps it for
    display.
    """

    records: tuple[MemberRecord, ...] = ()
    criteria: FilterCriteria = NO_FILTER
    sort: SortSpec = DEFAULT_SORT
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class RosterView:
    """
    Derived output for the rendering surface.

    `visible_page` reflects the active filters; `full_set_stats` always
    covers the whole snapshot.
    """

    visible_page: Page[MemberRecord]
    ordered: tuple[MemberRecord, ...]
    full_set_stats: StatsSummary
    criteria: FilterCriteria
    sort: SortSpec
    current_page: int
    total_pages: int = field(init=False)
    total_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_pages", self.visible_page.total_pages)
        object.__setattr__(self, "total_count", self.visible_page.total_count)
