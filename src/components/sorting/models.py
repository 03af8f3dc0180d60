"""
Sorting component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SortField(str, Enum):
    """Sortable roster columns."""

    NAME = "name"
    BIRTH_DATE = "birth_date"
    ROLE = "role"
    UNIT_NAME = "unit_name"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


DEFAULT_SORT = SortSpec()
