"""Restriction bits published by the host platform.

Values must match the host contract exactly; each one is a distinct power of two
so that any combination can be tested bit by bit.
"""

from __future__ import annotations

from enum import IntFlag

_NAME_PREFIX = "UX_RESTRICTIONS_"


class RestrictionFlags(IntFlag):
    NO_DIALPAD = 1
    NO_FILTERING = 2
    LIMIT_STRING_LENGTH = 4
    NO_KEYBOARD = 8
    NO_VIDEO = 16


# No restriction at all
BASELINE = 0

DEFINED_FLAGS: tuple[RestrictionFlags, ...] = tuple(RestrictionFlags)


def _parse_int(expression: str) -> int | None:
    try:
        return int(expression, 0)
    except ValueError:
        pass
    # Base 0 rejects decimals with leading zeros ("010")
    try:
        return int(expression, 10)
    except ValueError:
        return None


def parse_flags(expression: str | int) -> int:
    """Parse a restriction bitmask from an int or a flag expression.

    Accepts integer literals ("17", "0x11") and flag names joined by "|" or ","
    ("NO_DIALPAD|no_video", "UX_RESTRICTIONS_NO_KEYBOARD"). Names are
    case-insensitive. An empty expression means no restriction.

    Raises:
        ValueError: If a name is not a known restriction flag.
    """
    if isinstance(expression, int):
        return expression

    text = expression.strip()
    if not text:
        return BASELINE

    as_int = _parse_int(text)
    if as_int is not None:
        return as_int

    value = BASELINE
    for part in text.replace(",", "|").split("|"):
        name = part.strip().upper()
        if not name:
            continue
        if name.startswith(_NAME_PREFIX):
            name = name[len(_NAME_PREFIX) :]
        try:
            value |= int(RestrictionFlags[name])
        except KeyError:
            known = ", ".join(flag.name for flag in DEFINED_FLAGS if flag.name)
            raise ValueError(
                f"Unknown restriction flag {part.strip()!r} (known: {known})"
            ) from None
    return value
