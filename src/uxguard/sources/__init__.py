from uxguard.sources.interface import (
    BaseSource,
    RestrictionListener,
    RestrictionSource,
    SourceUnavailableError,
)
from uxguard.sources.registry import build_source
from uxguard.sources.scripted import ScriptedRestrictionSource, load_script
from uxguard.sources.static import StaticRestrictionSource
from uxguard.sources.unavailable import UnavailableRestrictionSource

__all__ = [
    "BaseSource",
    "RestrictionListener",
    "RestrictionSource",
    "ScriptedRestrictionSource",
    "SourceUnavailableError",
    "StaticRestrictionSource",
    "UnavailableRestrictionSource",
    "build_source",
    "load_script",
]
