"""Script-based language detection.

Detection is a fixed, priority-ordered scan: the first script pattern found
anywhere in the text decides the language. Mixed-script input is therefore
classified by whichever script comes first in ``_PATTERNS``, not by the
dominant one.
"""

import re
from enum import Enum
from typing import List, Optional, Pattern, Tuple


class LanguageCode(str, Enum):
    """Supported language codes (Sarvam AI locale format)."""

    ENGLISH = "en-IN"
    HINDI = "hi-IN"
    KANNADA = "kn-IN"
    TAMIL = "ta-IN"
    TELUGU = "te-IN"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_pivot(self) -> bool:
        return self is PIVOT_LANGUAGE


_DISPLAY_NAMES = {
    LanguageCode.ENGLISH: "English",
    LanguageCode.HINDI: "Hindi",
    LanguageCode.KANNADA: "Kannada",
    LanguageCode.TAMIL: "Tamil",
    LanguageCode.TELUGU: "Telugu",
}

# All generation happens in this language
PIVOT_LANGUAGE = LanguageCode.ENGLISH

# Order matters: reordering changes the result for mixed-script text.
_PATTERNS: List[Tuple[Pattern[str], LanguageCode]] = [
    (re.compile(r"[\u0900-\u097F]"), LanguageCode.HINDI),  # Devanagari
    (re.compile(r"[\u0C80-\u0CFF]"), LanguageCode.KANNADA),
    (re.compile(r"[\u0B80-\u0BFF]"), LanguageCode.TAMIL),
    (re.compile(r"[\u0C00-\u0C7F]"), LanguageCode.TELUGU),
    (re.compile(r"^[a-zA-Z0-9\s.,!?'\"-]+$"), LanguageCode.ENGLISH),
]


def detect_language(text: Optional[str]) -> LanguageCode:
    """Classify text by script. Never raises; defaults to the pivot language."""
    if not text:
        return PIVOT_LANGUAGE

    for pattern, language in _PATTERNS:
        if pattern.search(text):
            return language
    return PIVOT_LANGUAGE


class LanguageDetector:
    """Callable wrapper so the detector can be injected like other stages."""

    def detect(self, text: Optional[str]) -> LanguageCode:
        return detect_language(text)
