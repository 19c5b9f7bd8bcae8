"""Language codes shared by every platform adapter."""

from enum import Enum


class LanguageCode(str, Enum):
    """Canonical course language, spelled as a lowercase English name."""

    ENGLISH = "english"
    FRENCH = "french"
    ARABIC = "arabic"
    SPANISH = "spanish"
    GERMAN = "german"
    PORTUGUESE = "portuguese"
    ITALIAN = "italian"

    def __str__(self) -> str:
        return self.value
