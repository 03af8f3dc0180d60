"""
Member record source adapters.

Parses the record API's member payload into MemberRecord snapshots.

Payload shape (one element of the top-level JSON array):

    {
        "_id": "...",
        "nome": "Maria Silva",
        "dataNascimento": "1990-04-02T00:00:00.000Z",
        "cargo": "Membro",
        "cpf": "123.456.789-00",
        "igreja": {"_id": "...", "nome": "Sede Central", "tipo": "sede"}
    }
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.domain.entities import MemberRecord, MemberRole, OrganizationUnit, UnitType
from src.rules.models import DEFAULT_ROLE_LABELS

logger = logging.getLogger(__name__)

DEFAULT_HEADQUARTERS_TYPES = ("sede", "headquarters")


class MemberSourceError(Exception):
    """Raised when the record source delivers an unusable payload."""


# --- Payload Models ---


class ChurchPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(default="", alias="nome")
    type: str = Field(default="", alias="tipo")


class MemberPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="nome")
    birth_date: date = Field(alias="dataNascimento")
    role: str = Field(alias="cargo")
    national_id: str = Field(default="", alias="cpf")
    church: ChurchPayload | None = Field(default=None, alias="igreja")

    @field_validator("birth_date", mode="before")
    @classmethod
    def strip_time(cls, value: Any) -> Any:
        # The API serializes dates as full ISO timestamps
        if isinstance(value, str) and "T" in value:
            return value.split("T")[0]
        return value


# --- Conversion ---


def to_record(
    payload: MemberPayload,
    role_labels: Mapping[str, MemberRole],
    headquarters_types: Iterable[str] = DEFAULT_HEADQUARTERS_TYPES,
) -> MemberRecord:
    """Convert one payload into a MemberRecord."""
    role = role_labels.get(payload.role.strip())
    if role is None:
        raise MemberSourceError(f"Unknown role label: {payload.role!r}")

    unit = None
    if payload.church is not None:
        hq_types = {t.lower() for t in headquarters_types}
        unit = OrganizationUnit(
            id=payload.church.id,
            name=payload.church.name,
            unit_type=(
                UnitType.HEADQUARTERS
                if payload.church.type.lower() in hq_types
                else UnitType.BRANCH
            ),
        )

    return MemberRecord(
        id=payload.id,
        name=payload.name,
        birth_date=payload.birth_date,
        role=role,
        national_id=payload.national_id,
        unit=unit,
    )


def parse_members(
    data: Any,
    role_labels: Mapping[str, MemberRole] | None = None,
    headquarters_types: Iterable[str] = DEFAULT_HEADQUARTERS_TYPES,
) -> list[MemberRecord]:
    """
    Parse a decoded JSON payload into records.

    Raises MemberSourceError naming the first bad element.
    """
    if not isinstance(data, list):
        raise MemberSourceError("Member payload must be a JSON array")

    labels = role_labels if role_labels is not None else DEFAULT_ROLE_LABELS
    hq_types = tuple(headquarters_types)
    records: list[MemberRecord] = []
    for index, item in enumerate(data):
        try:
            payload = MemberPayload.model_validate(item)
            records.append(to_record(payload, labels, hq_types))
        except ValidationError as e:
            raise MemberSourceError(f"Invalid member at index {index}:\n{e}") from e
        except MemberSourceError as e:
            raise MemberSourceError(f"Invalid member at index {index}: {e}") from e
    return records


# --- Adapters ---


class InMemoryMemberSource:
    """In-memory record source for testing/dev."""

    def __init__(self, records: Iterable[MemberRecord] = ()) -> None:
        self._records = list(records)

    def load(self) -> list[MemberRecord]:
        return list(self._records)

    def replace(self, records: Iterable[MemberRecord]) -> None:
        self._records = list(records)


class JsonFileMemberSource:
    """Record source reading an exported API payload from disk."""

    def __init__(
        self,
        path: Path,
        role_labels: Mapping[str, MemberRole] | None = None,
        headquarters_types: Iterable[str] = DEFAULT_HEADQUARTERS_TYPES,
    ) -> None:
        self._path = path
        self._role_labels = role_labels
        self._headquarters_types = tuple(headquarters_types)

    def load(self) -> list[MemberRecord]:
        if not self._path.exists():
            raise FileNotFoundError(f"Member file not found at: {self._path}")

        with open(self._path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise MemberSourceError(f"Invalid JSON in {self._path}: {e}") from e

        records = parse_members(data, self._role_labels, self._headquarters_types)
        logger.info("Loaded %d members from %s", len(records), self._path)
        return records
