"""
Members roster API.

Read-only rendering surface over the roster engine. The member snapshot
is loaded once from the record source and replaced wholesale on reload;
each request derives its own view from query parameters.
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from src.adapters.member_source import MemberSourceError
from src.api.deps import build_controller, get_clock, get_member_source, get_rules
from src.components.ages import age_on, bracket_for
from src.components.report import MembersReport, build_members_report
from src.components.roster import RosterController
from src.components.sorting import SortDirection, SortField, SortSpec
from src.components.stats import BreakdownEntry, StatsSummary
from src.domain.entities import AgeBracket, MemberRecord, MemberRole
from src.ports.clock import ClockPort
from src.ports.members import MemberSourcePort
from src.rules.models import RosterRules

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Response Models ---


class MemberResponse(BaseModel):
    id: str
    name: str
    birth_date: date
    age: int
    age_bracket: AgeBracket
    role: MemberRole
    national_id: str
    unit_id: str | None
    unit_name: str


class BreakdownResponse(BaseModel):
    label: str
    count: int
    percentage: float


class StatsResponse(BaseModel):
    total: int
    role_breakdown: list[BreakdownResponse]
    age_breakdown: list[BreakdownResponse]
    unit_breakdown: list[BreakdownResponse]
    unit_type_breakdown: list[BreakdownResponse]
    mean_age: float
    most_common_role: str


class RosterResponse(BaseModel):
    items: list[MemberResponse]
    page: int
    page_size: int
    total_pages: int
    total_count: int
    has_previous: bool
    has_next: bool
    sort: SortField
    direction: SortDirection
    full_set_stats: StatsResponse


class SummaryCardResponse(BaseModel):
    label: str
    value: str


class ReportTableResponse(BaseModel):
    title: str
    headers: list[str]
    rows: list[list[str]]


class ReportResponse(BaseModel):
    title: str
    subtitle: str
    unit_name: str
    generated_on: date
    cards: list[SummaryCardResponse]
    tables: list[ReportTableResponse]
    insights: list[str]


class ReloadResponse(BaseModel):
    total: int


# --- Snapshot ---


_snapshot: list[MemberRecord] | None = None


def _load(source: MemberSourcePort) -> list[MemberRecord]:
    try:
        return source.load()
    except (MemberSourceError, FileNotFoundError) as e:
        logger.error("Member source failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Member records are unavailable",
        ) from e


def get_snapshot(
    source: MemberSourcePort = Depends(get_member_source),
) -> list[MemberRecord]:
    """Current member snapshot, loaded on first use."""
    global _snapshot
    if _snapshot is None:
        _snapshot = _load(source)
    return _snapshot


def reset_snapshot() -> None:
    """Drop the snapshot (for testing)."""
    global _snapshot
    _snapshot = None


# --- Helper Functions ---


def breakdown_to_response(entries: tuple[BreakdownEntry, ...]) -> list[BreakdownResponse]:
    return [
        BreakdownResponse(label=e.label, count=e.count, percentage=e.percentage)
        for e in entries
    ]


def stats_to_response(stats: StatsSummary) -> StatsResponse:
    return StatsResponse(
        total=stats.total,
        role_breakdown=breakdown_to_response(stats.role_breakdown),
        age_breakdown=breakdown_to_response(stats.age_breakdown),
        unit_breakdown=breakdown_to_response(stats.unit_breakdown),
        unit_type_breakdown=breakdown_to_response(stats.unit_type_breakdown),
        mean_age=stats.mean_age,
        most_common_role=stats.most_common_role,
    )


def member_to_response(record: MemberRecord, now: date) -> MemberResponse:
    age = age_on(record.birth_date, now)
    return MemberResponse(
        id=record.id,
        name=record.name,
        birth_date=record.birth_date,
        age=age,
        age_bracket=bracket_for(age),
        role=record.role,
        national_id=record.national_id,
        unit_id=record.unit.id if record.unit else None,
        unit_name=record.unit_name,
    )


def report_to_response(report: MembersReport) -> ReportResponse:
    return ReportResponse(
        title=report.title,
        subtitle=report.subtitle,
        unit_name=report.unit_name,
        generated_on=report.generated_on,
        cards=[SummaryCardResponse(label=c.label, value=c.value) for c in report.cards],
        tables=[
            ReportTableResponse(
                title=t.title,
                headers=list(t.headers),
                rows=[list(row) for row in t.rows],
            )
            for t in report.tables
        ],
        insights=list(report.insights),
    )


def _controller_for(
    records: list[MemberRecord],
    rules: RosterRules,
    clock: ClockPort,
    search: str,
    role: MemberRole | None,
    unit_id: str | None,
    age_bracket: AgeBracket | None,
    sort: SortField | None,
    direction: SortDirection | None,
) -> RosterController:
    controller = build_controller(rules, clock, records)
    controller.set_search(search)
    controller.set_role_filter(role)
    controller.set_unit_filter(unit_id)
    controller.set_age_bracket_filter(age_bracket)
    if sort is not None:
        controller.set_sort(SortSpec(field=sort, direction=direction or SortDirection.ASC))
    return controller


# --- Routes ---


@router.get("/roster", response_model=RosterResponse)
def get_roster(
    search: str = Query("", max_length=200),
    role: MemberRole | None = None,
    unit_id: str | None = None,
    age_bracket: AgeBracket | None = None,
    sort: SortField | None = None,
    direction: SortDirection | None = None,
    page: int = 1,
    records: list[MemberRecord] = Depends(get_snapshot),
    rules: RosterRules = Depends(get_rules),
    clock: ClockPort = Depends(get_clock),
) -> RosterResponse:
    """Visible roster page plus full-snapshot statistics."""
    controller = _controller_for(
        records, rules, clock, search, role, unit_id, age_bracket, sort, direction
    )
    controller.set_page(page)
    view = controller.view()
    now = clock.now()

    return RosterResponse(
        items=[member_to_response(r, now) for r in view.visible_page.items],
        page=view.current_page,
        page_size=view.visible_page.page_size,
        total_pages=view.total_pages,
        total_count=view.total_count,
        has_previous=view.visible_page.has_previous,
        has_next=view.visible_page.has_next,
        sort=view.sort.field,
        direction=view.sort.direction,
        full_set_stats=stats_to_response(view.full_set_stats),
    )


@router.get("/report", response_model=ReportResponse)
def get_report(
    search: str = Query("", max_length=200),
    role: MemberRole | None = None,
    unit_id: str | None = None,
    age_bracket: AgeBracket | None = None,
    sort: SortField | None = None,
    direction: SortDirection | None = None,
    unit_name: str = "",
    records: list[MemberRecord] = Depends(get_snapshot),
    rules: RosterRules = Depends(get_rules),
    clock: ClockPort = Depends(get_clock),
) -> ReportResponse:
    """Members report content over the full filtered and sorted rows."""
    controller = _controller_for(
        records, rules, clock, search, role, unit_id, age_bracket, sort, direction
    )
    view = controller.view()
    report = build_members_report(
        view.ordered,
        view.full_set_stats,
        clock.now(),
        unit_name=unit_name,
        unknown_unit_label=rules.roster.unknown_unit_label,
    )
    return report_to_response(report)


@router.post("/reload", response_model=ReloadResponse)
def reload_snapshot(
    source: MemberSourcePort = Depends(get_member_source),
) -> ReloadResponse:
    """Replace the snapshot after records changed at the source."""
    global _snapshot
    _snapshot = _load(source)
    logger.info("Member snapshot reloaded: %d records", len(_snapshot))
    return ReloadResponse(total=len(_snapshot))
