"""
Report component - Data models.

Renderer-neutral tables; a PDF or spreadsheet renderer consumes these.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class SummaryCard:
    label: str
    value: str


@dataclass(frozen=True)
class ReportTable:
    title: str
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True)
class MembersReport:
    """Members report document content."""

    title: str
    subtitle: str
    unit_name: str
    generated_on: date
    cards: tuple[SummaryCard, ...]
    tables: tuple[ReportTable, ...]
    insights: tuple[str, ...] = ()
