"""
Roster component - Members roster view state and derivation.
"""

from ._impl import (
    clear_filters,
    derive_ordered,
    derive_view,
    reload,
    set_age_bracket_filter,
    set_page,
    set_role_filter,
    set_search,
    set_sort,
    set_unit_filter,
    toggle_sort,
)
from .component import RosterController
from .models import DEFAULT_PAGE_SIZE, RosterState, RosterView
from .ports import ClockPort, MemberSourcePort

__all__ = [
    # Controller
    "RosterController",
    # Pure transitions
    "clear_filters",
    "reload",
    "set_age_bracket_filter",
    "set_page",
    "set_role_filter",
    "set_search",
    "set_sort",
    "set_unit_filter",
    "toggle_sort",
    # Derivation
    "derive_ordered",
    "derive_view",
    # Models
    "DEFAULT_PAGE_SIZE",
    "RosterState",
    "RosterView",
    # Ports
    "ClockPort",
    "MemberSourcePort",
]
