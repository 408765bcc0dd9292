from __future__ import annotations

from typing import Protocol, Sequence


class IKeywordTable(Protocol):
    """Read-only mapping from a lowercase keyword to local image locations."""

    def contains(self, keyword: str) -> bool:
        ...

    def lookup(self, keyword: str) -> Sequence[str]:
        """Return the ordered, non-empty location list; raise NotFoundError if absent."""
        ...

    def keywords(self) -> list[str]:
        """Configured keywords in definition order."""
        ...
