from __future__ import annotations

from collections.abc import Collection

from uxguard.models.restrictions import AppFunction, TruncatedText

ELLIPSIS = "..."

# Length limit applied to long text while driving
DEFAULT_MAX_TEXT_LENGTH = 120


def truncate_text(text: str, max_length: int) -> str:
    """Shorten ``text`` to at most ``max_length`` characters.

    Text that already fits is returned as is. Longer text keeps its first
    ``max_length - 3`` characters followed by "...", so the result is exactly
    ``max_length`` long. ``max_length`` must be at least 4.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def limit_display_text(
    text: str,
    *,
    blocked: Collection[AppFunction],
    max_length: int = DEFAULT_MAX_TEXT_LENGTH,
) -> TruncatedText:
    """Apply the string length limit only while long text is a blocked function."""
    if AppFunction.limit_string_length not in blocked:
        return TruncatedText(text=text, truncated=False)

    limited = truncate_text(text, max_length)
    return TruncatedText(text=limited, truncated=limited != text)
