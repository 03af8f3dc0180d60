"""
Roster component - Port interfaces.
"""

from __future__ import annotations

from src.ports.clock import ClockPort
from src.ports.members import MemberSourcePort

__all__ = ["ClockPort", "MemberSourcePort"]
