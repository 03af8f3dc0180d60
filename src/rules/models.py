from pydantic import BaseModel, Field

from src.components.sorting import SortDirection, SortField
from src.domain.entities import MemberRole

# Labels the record API uses for roles, plus the tags themselves.
DEFAULT_ROLE_LABELS: dict[str, MemberRole] = {
    "Membro": MemberRole.MEMBER,
    "Líder": MemberRole.LEADER,
    "Pastor": MemberRole.PASTOR,
    "Diácono": MemberRole.DEACON,
    "Presbítero": MemberRole.ELDER,
    "Evangelista": MemberRole.EVANGELIST,
    "Missionário": MemberRole.MISSIONARY,
    "Músico": MemberRole.MUSICIAN,
    "Professor": MemberRole.TEACHER,
    "Auxiliar": MemberRole.ASSISTANT,
    **{role.value: role for role in MemberRole},
}


class SortRules(BaseModel):
    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASC


class RosterViewRules(BaseModel):
    page_size: int = Field(default=12, ge=1)
    unknown_unit_label: str = "unknown"
    default_sort: SortRules = Field(default_factory=SortRules)


class SourceRules(BaseModel):
    path: str = "members.json"
    headquarters_types: list[str] = Field(default_factory=lambda: ["sede", "headquarters"])
    role_labels: dict[str, MemberRole] = Field(
        default_factory=lambda: dict(DEFAULT_ROLE_LABELS)
    )


class RosterRules(BaseModel):
    roster: RosterViewRules = Field(default_factory=RosterViewRules)
    source: SourceRules = Field(default_factory=SourceRules)
