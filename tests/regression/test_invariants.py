"""
Roster engine invariants, checked over seeded random record sets.
"""

import math
import random
from datetime import date, timedelta

import pytest

from src.components.filtering import FilterCriteria, apply_filter
from src.components.pagination import paginate
from src.components.sorting import SortDirection, SortField, SortSpec, apply_sort
from src.components.stats import summarize
from src.domain.entities import (
    AgeBracket,
    MemberRecord,
    MemberRole,
    OrganizationUnit,
    UnitType,
)

NOW = date(2024, 6, 15)

UNITS = [
    OrganizationUnit(id="c1", name="Sede", unit_type=UnitType.HEADQUARTERS),
    OrganizationUnit(id="c2", name="Norte"),
    OrganizationUnit(id="c3", name="Sul"),
    None,
]
FIRST_NAMES = ["Maria", "João", "Ana", "Pedro", "Lucas", "Beatriz", "Rafael"]
LAST_NAMES = ["Silva", "Souza", "Costa", "Lima", "Pereira"]


def random_roster(seed: int) -> list[MemberRecord]:
    rng = random.Random(seed)
    return [
        MemberRecord(
            id=f"{seed}-{i}",
            name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
            birth_date=date(1930, 1, 1) + timedelta(days=rng.randrange(0, 34000)),
            role=rng.choice(list(MemberRole)),
            national_id=f"{rng.randrange(1000):03d}.{rng.randrange(1000):03d}",
            unit=rng.choice(UNITS),
        )
        for i in range(rng.randrange(0, 80))
    ]


SEEDS = range(20)


@pytest.mark.parametrize("seed", SEEDS)
def test_filter_is_order_preserving_subset(seed: int) -> None:
    records = random_roster(seed)
    criteria = FilterCriteria(search="a", age_bracket=AgeBracket.FROM_30_TO_49)
    result = apply_filter(records, criteria, NOW)
    ids = [r.id for r in records]
    positions = [ids.index(r.id) for r in result]
    assert positions == sorted(positions)


@pytest.mark.parametrize("seed", SEEDS)
def test_breakdowns_are_consistent(seed: int) -> None:
    records = random_roster(seed)
    stats = summarize(records, NOW)

    for breakdown in (stats.role_breakdown, stats.age_breakdown, stats.unit_breakdown):
        assert sum(e.count for e in breakdown) == len(records)
        assert all(e.count > 0 for e in breakdown)
        for e in breakdown:
            assert e.percentage == pytest.approx(100 * e.count / len(records))
        if records:
            assert sum(e.percentage for e in breakdown) == pytest.approx(100.0)


@pytest.mark.parametrize("seed", SEEDS)
def test_age_breakdown_in_bracket_order(seed: int) -> None:
    stats = summarize(random_roster(seed), NOW)
    order = [b.value for b in AgeBracket]
    labels = [e.label for e in stats.age_breakdown]
    assert labels == [b for b in order if b in labels]


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("size", [1, 7, 12])
def test_total_pages(seed: int, size: int) -> None:
    records = random_roster(seed)
    for page_number in (0, 1, 2, 100):
        page = paginate(records, page_number, size)
        assert page.total_pages == max(1, math.ceil(len(records) / size))


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("field", list(SortField))
def test_sort_is_a_permutation_in_key_order(seed: int, field: SortField) -> None:
    records = random_roster(seed)
    asc = apply_sort(records, SortSpec(field))
    desc = apply_sort(records, SortSpec(field, SortDirection.DESC))
    assert sorted(r.id for r in asc) == sorted(r.id for r in records)

    keys = {
        SortField.NAME: lambda r: r.name.lower(),
        SortField.BIRTH_DATE: lambda r: r.birth_date,
        SortField.ROLE: lambda r: r.role.value,
        SortField.UNIT_NAME: lambda r: r.unit_name,
    }[field]
    assert [keys(r) for r in asc] == sorted(keys(r) for r in records)
    assert [keys(r) for r in desc] == [keys(r) for r in reversed(asc)]
