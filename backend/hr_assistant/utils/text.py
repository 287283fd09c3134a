"""Text helpers for logging user and model content.

Chat messages and model answers can be long and span several lines. These
helpers turn them into short single-line previews so a log record stays
readable without dumping whole policy answers.
"""

import re
from typing import Optional

# Word-break characters, including the Devanagari danda used as a full stop
_BREAK_CHARS = {" ", ",", ".", "!", "?", ";", ":", "-", "\u0964"}


def safe_truncate(text: str, max_chars: int, suffix: str = "...") -> str:
    """Truncate text to ``max_chars``, preferring a nearby word boundary.

    Python slices on code points, so Indic combining marks may still be
    separated from their base letter; the result is only meant for logs.

    Args:
        text: Text to truncate
        max_chars: Maximum characters (excluding suffix)
        suffix: Suffix to append if truncated (default "...")

    Returns:
        Truncated text with suffix if needed
    """
    if not text or len(text) <= max_chars:
        return text

    truncated = text[:max_chars]

    # Look back up to 20 characters for the nearest break point
    for i in range(1, min(20, max_chars - 1) + 1):
        if truncated[-i] in _BREAK_CHARS:
            truncated = truncated[: len(truncated) - i].rstrip()
            break

    return truncated + suffix


def log_preview(text: Optional[str], max_chars: int = 120) -> str:
    """Collapse whitespace and truncate text for a single log line."""
    if not text:
        return ""

    # Remove control characters, then fold all whitespace runs into one space
    text = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", text)
    text = re.sub(r"\s+", " ", text).strip()

    return safe_truncate(text, max_chars)
