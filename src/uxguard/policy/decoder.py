"""Map a restriction snapshot to the set of app functions that must be blocked.

Flags are independent: every defined bit is tested on its own, so any
combination (including all of them) decodes to the union of its functions.
Bits the platform may add later are not in the table and are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from uxguard.models.restrictions import AppFunction, BlockedFunctionSet, RestrictionSnapshot
from uxguard.restrictions.flags import RestrictionFlags

# NO_FILTERING and NO_VIDEO map to app-specific choices (messaging, video playback)
FLAG_TO_FUNCTION: Mapping[RestrictionFlags, AppFunction] = MappingProxyType(
    {
        RestrictionFlags.NO_DIALPAD: AppFunction.call,
        RestrictionFlags.NO_FILTERING: AppFunction.message,
        RestrictionFlags.NO_VIDEO: AppFunction.video,
        RestrictionFlags.NO_KEYBOARD: AppFunction.keyboard,
        RestrictionFlags.LIMIT_STRING_LENGTH: AppFunction.limit_string_length,
    }
)

_NOTHING_BLOCKED: BlockedFunctionSet = frozenset()


def decode(snapshot: RestrictionSnapshot | None) -> BlockedFunctionSet:
    """Return the functions blocked by ``snapshot``.

    Nothing is blocked when no snapshot is available or when the platform does
    not require distraction optimization, whatever bits are set.
    """
    if snapshot is None or not snapshot.requires_optimization:
        return _NOTHING_BLOCKED

    flags = snapshot.active_flags
    return frozenset(function for flag, function in FLAG_TO_FUNCTION.items() if flags & flag)
