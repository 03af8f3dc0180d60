import json
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from typing import Any

import pytest

from src.adapters.clock import FixedClock
from src.domain.entities import MemberRecord, MemberRole, OrganizationUnit, UnitType

NOW = datetime(2024, 6, 15, 12, 0)

SEDE = OrganizationUnit(id="c-sede", name="Sede Central", unit_type=UnitType.HEADQUARTERS)
NORTE = OrganizationUnit(id="c-norte", name="Congregação Norte", unit_type=UnitType.BRANCH)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def make_member() -> Callable[..., MemberRecord]:
    """Factory for member records with sensible defaults."""

    def _make(
        member_id: str,
        name: str | None = None,
        *,
        birth_date: date = date(1990, 1, 1),
        role: MemberRole = MemberRole.MEMBER,
        national_id: str = "000.000.000-00",
        unit: OrganizationUnit | None = SEDE,
    ) -> MemberRecord:
        return MemberRecord(
            id=member_id,
            name=name or f"Member {member_id}",
            birth_date=birth_date,
            role=role,
            national_id=national_id,
            unit=unit,
        )

    return _make


@pytest.fixture
def congregation(make_member: Callable[..., MemberRecord]) -> list[MemberRecord]:
    """25 records: 13 Member, 7 Leader, 5 Pastor, split across two churches."""
    roles = (
        [MemberRole.MEMBER] * 13 + [MemberRole.LEADER] * 7 + [MemberRole.PASTOR] * 5
    )
    return [
        make_member(
            f"{i:02d}",
            f"Person {i:02d}",
            birth_date=date(1950 + i * 2, (i % 12) + 1, 10),
            role=role,
            unit=SEDE if i % 2 == 0 else NORTE,
        )
        for i, role in enumerate(roles)
    ]


@pytest.fixture
def member_payload() -> list[dict[str, Any]]:
    """Member payload as exported by the record API."""
    sede = {"_id": "c-sede", "nome": "Sede Central", "tipo": "sede"}
    norte = {"_id": "c-norte", "nome": "Congregação Norte", "tipo": "congregacao"}
    return [
        {
            "_id": "m1",
            "nome": "Maria Silva",
            "dataNascimento": "1985-03-20T00:00:00.000Z",
            "cargo": "Líder",
            "cpf": "123.456.789-00",
            "igreja": sede,
        },
        {
            "_id": "m2",
            "nome": "João Souza",
            "dataNascimento": "2000-06-15",
            "cargo": "Membro",
            "cpf": "987.654.321-00",
            "igreja": norte,
        },
        {
            "_id": "m3",
            "nome": "Ana Pereira",
            "dataNascimento": "1958-11-02T00:00:00.000Z",
            "cargo": "Pastor",
            "cpf": "111.222.333-44",
            "igreja": sede,
        },
        {
            "_id": "m4",
            "nome": "Lucas Costa",
            "dataNascimento": "2011-01-30T00:00:00.000Z",
            "cargo": "Músico",
            "cpf": "555.666.777-88",
        },
    ]


@pytest.fixture
def members_file(tmp_path: Path, member_payload: list[dict[str, Any]]) -> Path:
    path = tmp_path / "members.json"
    path.write_text(json.dumps(member_payload, ensure_ascii=False), encoding="utf-8")
    return path
