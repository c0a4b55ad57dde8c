from __future__ import annotations

from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict


class TruncatedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    truncated: bool


class RestrictionSnapshot(BaseModel):
    """Restriction state as reported by the host platform at one point in time."""

    model_config = ConfigDict(frozen=True)

    active_flags: int = 0
    requires_optimization: bool = False

    @classmethod
    def unrestricted(cls) -> RestrictionSnapshot:
        """Snapshot used when no restriction data can be obtained."""
        return cls(active_flags=0, requires_optimization=False)


class AppFunction(str, Enum):
    call = "call"
    message = "message"
    video = "video"
    keyboard = "keyboard"
    limit_string_length = "limit_string_length"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[AppFunction, str] = {
    AppFunction.call: "Call",
    AppFunction.message: "Messaging",
    AppFunction.video: "Video",
    AppFunction.keyboard: "Keyboard input",
    AppFunction.limit_string_length: "Long text",
}

# Replaced as a whole on every snapshot, never mutated
BlockedFunctionSet: TypeAlias = frozenset[AppFunction]
