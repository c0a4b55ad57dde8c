from __future__ import annotations

from uxguard.models.restrictions import RestrictionSnapshot
from uxguard.sources.interface import BaseSource, SourceUnavailableError


class UnavailableRestrictionSource(BaseSource):
    """A host without the restriction service; connecting always fails."""

    name = "unavailable"

    def __init__(self, reason: str = "restriction service not available on this host") -> None:
        super().__init__()
        self.reason = reason

    def connect(self) -> None:
        raise SourceUnavailableError(self.reason)

    def current(self) -> RestrictionSnapshot | None:
        return None
