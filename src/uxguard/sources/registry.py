"""Build the restriction source selected in the settings."""

from __future__ import annotations

from uxguard.config.settings import SourceConfig, SourceKind
from uxguard.models.restrictions import RestrictionSnapshot
from uxguard.sources.interface import RestrictionSource
from uxguard.sources.scripted import ScriptedRestrictionSource
from uxguard.sources.static import StaticRestrictionSource
from uxguard.sources.unavailable import UnavailableRestrictionSource


def build_source(config: SourceConfig) -> RestrictionSource:
    """Create a source for ``config``.

    Raises:
        ValueError: If a scripted source has no script configured.
    """
    if config.kind == SourceKind.unavailable:
        return UnavailableRestrictionSource()

    if config.kind == SourceKind.scripted:
        if config.script is None:
            raise ValueError("source.kind = 'scripted' requires source.script to be set")
        return ScriptedRestrictionSource.from_file(config.script)

    return StaticRestrictionSource(
        RestrictionSnapshot(
            active_flags=config.active_flags,
            requires_optimization=config.requires_optimization,
        )
    )
