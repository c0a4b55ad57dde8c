from uxguard.models.restrictions import (
    AppFunction,
    BlockedFunctionSet,
    RestrictionSnapshot,
    TruncatedText,
)

__all__ = [
    "AppFunction",
    "BlockedFunctionSet",
    "RestrictionSnapshot",
    "TruncatedText",
]
