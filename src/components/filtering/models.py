"""
Filtering component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import AgeBracket, MemberRole


@dataclass(frozen=True)
class FilterCriteria:
    """Composite roster filter. Empty/None clauses always pass."""

    search: str = ""
    role: MemberRole | None = None
    unit_id: str | None = None
    age_bracket: AgeBracket | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.search == ""
            and self.role is None
            and not self.unit_id
            and self.age_bracket is None
        )


NO_FILTER = FilterCriteria()
