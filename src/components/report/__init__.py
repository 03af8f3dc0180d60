"""
Report component - Members report content for export.
"""

from .component import (
    ROSTER_HEADERS,
    breakdown_table,
    build_members_report,
    format_percentage,
    member_insights,
    roster_table,
)
from .models import MembersReport, ReportTable, SummaryCard

__all__ = [
    # Entry points
    "build_members_report",
    "breakdown_table",
    "roster_table",
    "format_percentage",
    "member_insights",
    "ROSTER_HEADERS",
    # Models
    "MembersReport",
    "ReportTable",
    "SummaryCard",
]
