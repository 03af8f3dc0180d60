import os
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.clock import SystemClock
from src.adapters.member_source import JsonFileMemberSource
from src.components.roster import RosterController
from src.components.sorting import SortSpec
from src.domain.entities import MemberRecord
from src.ports.clock import ClockPort
from src.ports.members import MemberSourcePort
from src.rules.loader import load_rules
from src.rules.models import RosterRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("ROSTER_DATA_DIR", "./data"))
        self.rules_path = Path(os.environ.get("ROSTER_RULES", self.base_dir / "roster.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> RosterRules:
    return load_rules(get_settings().rules_path)


# --- Adapters ---
def get_clock() -> ClockPort:
    return SystemClock()


def get_member_source(
    settings: Settings = Depends(get_settings),
    rules: RosterRules = Depends(get_rules),
) -> MemberSourcePort:
    return JsonFileMemberSource(
        settings.data_dir / rules.source.path,
        role_labels=rules.source.role_labels,
        headquarters_types=rules.source.headquarters_types,
    )


# --- Roster ---
def build_controller(
    rules: RosterRules,
    clock: ClockPort,
    records: Iterable[MemberRecord] = (),
) -> RosterController:
    """Create a controller configured from rules over a snapshot."""
    view_rules = rules.roster
    return RosterController(
        clock,
        records,
        page_size=view_rules.page_size,
        unknown_unit_label=view_rules.unknown_unit_label,
        initial_sort=SortSpec(
            field=view_rules.default_sort.field,
            direction=view_rules.default_sort.direction,
        ),
    )
