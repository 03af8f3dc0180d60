from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict

# --- Enums ---


class MemberRole(str, Enum):
    """Role tags, in enumeration order."""

    MEMBER = "Member"
    LEADER = "Leader"
    PASTOR = "Pastor"
    DEACON = "Deacon"
    ELDER = "Elder"
    EVANGELIST = "Evangelist"
    MISSIONARY = "Missionary"
    MUSICIAN = "Musician"
    TEACHER = "Teacher"
    ASSISTANT = "Assistant"


class UnitType(str, Enum):
    HEADQUARTERS = "headquarters"
    BRANCH = "branch"


class AgeBracket(str, Enum):
    """Fixed, contiguous age ranges, in bracket order."""

    UNDER_18 = "<18"
    FROM_18_TO_29 = "18-29"
    FROM_30_TO_49 = "30-49"
    FROM_50_TO_64 = "50-64"
    OVER_65 = "65+"


# --- Organization ---


class OrganizationUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    unit_type: UnitType = UnitType.BRANCH


# --- Members ---


class MemberRecord(BaseModel):
    """
    A member as delivered by the record source.

    `unit` is a denormalized reference copy of the church the member
    belongs to; the record does not own it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    birth_date: date
    role: MemberRole
    national_id: str = ""
    unit: OrganizationUnit | None = None

    @property
    def unit_name(self) -> str:
        return self.unit.name if self.unit else ""
