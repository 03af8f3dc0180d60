from typing import Protocol

from src.domain.entities import MemberRecord


class MemberSourcePort(Protocol):
    """Record source delivering the full member snapshot."""

    def load(self) -> list[MemberRecord]:
        """Return every member record, each with its unit resolved."""
        ...
