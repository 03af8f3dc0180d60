"""
Report component - Members report content.

Functional Core - builds the tables of the members report from the
filtered, sorted (unpaginated) rows and the full-snapshot statistics.

Distribution tables are only included when they have rows; the roster
table is always present. Insights are short sentences derived from the
statistics and close the report.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from src.components.ages import age_on
from src.components.stats import UNKNOWN_UNIT_LABEL, BreakdownEntry, StatsSummary
from src.domain.entities import MemberRecord, UnitType

from .models import MembersReport, ReportTable, SummaryCard

ROSTER_HEADERS = ("Name", "Birth date", "Age", "Role", "Church", "National ID")
DATE_FORMAT = "%d/%m/%Y"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def breakdown_table(
    title: str,
    category_header: str,
    entries: Sequence[BreakdownEntry],
) -> ReportTable:
    return ReportTable(
        title=title,
        headers=(category_header, "Members", "Percentage"),
        rows=tuple(
            (e.label, str(e.count), format_percentage(e.percentage)) for e in entries
        ),
    )


def roster_table(rows: Sequence[MemberRecord], now: date) -> ReportTable:
    return ReportTable(
        title="Members",
        headers=ROSTER_HEADERS,
        rows=tuple(
            (
                r.name,
                r.birth_date.strftime(DATE_FORMAT),
                str(age_on(r.birth_date, now)),
                r.role.value,
                r.unit_name,
                r.national_id,
            )
            for r in rows
        ),
    )


def summary_cards(rows: Sequence[MemberRecord], stats: StatsSummary) -> tuple[SummaryCard, ...]:
    return (
        SummaryCard("Total members", str(stats.total)),
        SummaryCard("Listed members", str(len(rows))),
        SummaryCard("Average age", f"{stats.mean_age:.1f}"),
        SummaryCard("Most common role", stats.most_common_role or "-"),
        SummaryCard("Active roles", str(len(stats.role_breakdown))),
    )


def member_insights(
    stats: StatsSummary,
    unknown_unit_label: str = UNKNOWN_UNIT_LABEL,
) -> tuple[str, ...]:
    """Headquarters vs. branch comparison and average members per church."""
    insights: list[str] = []

    by_type = {e.label: e.count for e in stats.unit_type_breakdown}
    headquarters = by_type.get(UnitType.HEADQUARTERS.value, 0)
    branches = by_type.get(UnitType.BRANCH.value, 0)
    if headquarters < branches:
        insights.append(
            f"Branches have {branches} members vs {headquarters} at headquarters"
        )

    churches = [e for e in stats.unit_breakdown if e.label != unknown_unit_label]
    if churches:
        average = stats.total / len(churches)
        insights.append(f"Average of {average:.1f} members per church")

    return tuple(insights)


def build_members_report(
    rows: Sequence[MemberRecord],
    stats: StatsSummary,
    now: date,
    *,
    title: str = "Members Report",
    subtitle: str = "Congregation overview",
    unit_name: str = "",
    unknown_unit_label: str = UNKNOWN_UNIT_LABEL,
) -> MembersReport:
    """Assemble the report document content."""
    candidates = (
        breakdown_table("Distribution by Role", "Role", stats.role_breakdown),
        breakdown_table("Distribution by Age", "Age group", stats.age_breakdown),
        breakdown_table("Distribution by Church", "Church", stats.unit_breakdown),
    )
    tables = tuple(t for t in candidates if not t.is_empty) + (roster_table(rows, now),)

    generated_on = now.date() if isinstance(now, datetime) else now

    return MembersReport(
        title=title,
        subtitle=subtitle,
        unit_name=unit_name,
        generated_on=generated_on,
        cards=summary_cards(rows, stats),
        tables=tables,
        insights=member_insights(stats, unknown_unit_label),
    )
