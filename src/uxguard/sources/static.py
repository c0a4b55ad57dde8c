from __future__ import annotations

from uxguard.models.restrictions import RestrictionSnapshot
from uxguard.sources.interface import BaseSource


class StaticRestrictionSource(BaseSource):
    """Reports one fixed snapshot and never changes."""

    name = "static"

    def __init__(self, snapshot: RestrictionSnapshot | None = None) -> None:
        super().__init__()
        self._snapshot = snapshot

    def current(self) -> RestrictionSnapshot | None:
        return self._snapshot
