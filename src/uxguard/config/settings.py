from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from uxguard.policy.truncation import DEFAULT_MAX_TEXT_LENGTH
from uxguard.render.strings import INFO_TEXT_LONG
from uxguard.restrictions.flags import parse_flags


class SourceKind(str, Enum):
    static = "static"
    scripted = "scripted"
    unavailable = "unavailable"


class DisplayConfig(BaseModel):
    # Room for the "..." marker plus at least one character
    max_text_length: int = Field(default=DEFAULT_MAX_TEXT_LENGTH, ge=4)
    info_text: str = INFO_TEXT_LONG


class SourceConfig(BaseModel):
    kind: SourceKind = SourceKind.static
    active_flags: int = 0
    requires_optimization: bool = False
    script: Path | None = None
    interval: float = Field(default=1.0, ge=0)

    @field_validator("active_flags", mode="before")
    @classmethod
    def _parse_flag_expression(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_flags(value)
        return value


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        # Manually override from environment variables
        if "UXGUARD_DISPLAY__MAX_TEXT_LENGTH" in os.environ:
            self.display = DisplayConfig(
                max_text_length=int(os.environ["UXGUARD_DISPLAY__MAX_TEXT_LENGTH"]),
                info_text=self.display.info_text,
            )
        if "UXGUARD_SOURCE__KIND" in os.environ:
            self.source.kind = SourceKind(os.environ["UXGUARD_SOURCE__KIND"])
