"""Scripted restriction source for demos and tests.

A script is a JSON array of snapshots, e.g.::

    [
      {"active_flags": 0, "requires_optimization": false},
      {"active_flags": "NO_DIALPAD|NO_VIDEO", "requires_optimization": true}
    ]

``active_flags`` accepts an int or a flag expression understood by
:func:`uxguard.restrictions.parse_flags`. The first entry is the initial state,
the rest are pushed in order by :meth:`ScriptedRestrictionSource.play`.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter, field_validator

from uxguard.models.restrictions import RestrictionSnapshot
from uxguard.restrictions.flags import parse_flags
from uxguard.sources.interface import BaseSource, SourceUnavailableError

logger = logging.getLogger(__name__)


class ScriptEntry(BaseModel):
    active_flags: int = 0
    requires_optimization: bool = True

    @field_validator("active_flags", mode="before")
    @classmethod
    def _parse_flag_expression(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_flags(value)
        return value

    def to_snapshot(self) -> RestrictionSnapshot:
        return RestrictionSnapshot(
            active_flags=self.active_flags,
            requires_optimization=self.requires_optimization,
        )


_SCRIPT_ADAPTER = TypeAdapter(list[ScriptEntry])


def load_script(path: Path) -> list[RestrictionSnapshot]:
    """Read a snapshot script from a JSON file.

    Raises:
        FileNotFoundError: If the script does not exist.
        RuntimeError: If the file is not valid JSON.
        pydantic.ValidationError: If an entry is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Restriction script not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Failed to parse restriction script at {path}: {e}") from e

    return [entry.to_snapshot() for entry in _SCRIPT_ADAPTER.validate_python(data)]


class ScriptedRestrictionSource(BaseSource):
    name = "scripted"

    def __init__(self, snapshots: Sequence[RestrictionSnapshot]) -> None:
        super().__init__()
        self._snapshots = list(snapshots)
        self._position = 0

    @classmethod
    def from_file(cls, path: Path) -> ScriptedRestrictionSource:
        return cls(load_script(path))

    @property
    def remaining(self) -> int:
        return max(len(self._snapshots) - self._position - 1, 0)

    def current(self) -> RestrictionSnapshot | None:
        if not self._snapshots:
            return None
        return self._snapshots[self._position]

    def advance(self) -> bool:
        """Push the next snapshot to the listener. Returns False once exhausted."""
        if not self._connected:
            raise SourceUnavailableError("scripted source is not connected")
        if self._position + 1 >= len(self._snapshots):
            return False

        self._position += 1
        snapshot = self._snapshots[self._position]
        logger.debug("Pushing scripted snapshot %d: %s", self._position, snapshot)
        self._emit(snapshot)
        return True

    def play(self, *, interval: float = 0.0) -> int:
        """Push all remaining snapshots in order and return how many were sent."""
        sent = 0
        while self.remaining:
            if interval > 0:
                time.sleep(interval)
            self.advance()
            sent += 1
        return sent
