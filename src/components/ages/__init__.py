"""
Ages component - Age and age bracket resolution.
"""

from .component import BRACKET_UPPER_BOUNDS, age_on, bracket_for, bracket_on

__all__ = [
    "BRACKET_UPPER_BOUNDS",
    "age_on",
    "bracket_for",
    "bracket_on",
]
