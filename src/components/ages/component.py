"""
Ages component - Age and age bracket resolution.

Functional Core - pure functions, `now` is always passed in.

Invariants:
- Age is the calendar-year difference, minus one before the birthday
- Brackets are contiguous and exhaustive: <18, 18-29, 30-49, 50-64, 65+
"""

from __future__ import annotations

from datetime import date

from src.domain.entities import AgeBracket

# Exclusive upper bound of each bracket, in bracket order. 65+ is open ended.
BRACKET_UPPER_BOUNDS: tuple[tuple[int, AgeBracket], ...] = (
    (18, AgeBracket.UNDER_18),
    (30, AgeBracket.FROM_18_TO_29),
    (50, AgeBracket.FROM_30_TO_49),
    (65, AgeBracket.FROM_50_TO_64),
)


def age_on(birth_date: date, now: date) -> int:
    """
    Whole years between birth_date and now.

    `now` may be a datetime; only its calendar date is used.
    """
    years = now.year - birth_date.year
    if (now.month, now.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def bracket_for(age: int) -> AgeBracket:
    """Map an age in years to its bracket."""
    for upper, bracket in BRACKET_UPPER_BOUNDS:
        if age < upper:
            return bracket
    return AgeBracket.OVER_65


def bracket_on(birth_date: date, now: date) -> AgeBracket:
    return bracket_for(age_on(birth_date, now))
