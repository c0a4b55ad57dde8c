from uxguard.policy.decoder import FLAG_TO_FUNCTION, decode
from uxguard.policy.truncation import (
    DEFAULT_MAX_TEXT_LENGTH,
    ELLIPSIS,
    limit_display_text,
    truncate_text,
)

__all__ = [
    "DEFAULT_MAX_TEXT_LENGTH",
    "ELLIPSIS",
    "FLAG_TO_FUNCTION",
    "decode",
    "limit_display_text",
    "truncate_text",
]
