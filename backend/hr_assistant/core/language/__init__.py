"""Language detection package."""

from .detector import (
    PIVOT_LANGUAGE,
    LanguageCode,
    LanguageDetector,
    detect_language,
)

__all__ = [
    "PIVOT_LANGUAGE",
    "LanguageCode",
    "LanguageDetector",
    "detect_language",
]
