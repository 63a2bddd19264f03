"""Dictionary engine models.

Defines the reserved seed entry and the result types returned by the
translation resolver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

MISSING_TRANSLATION_ERROR = "Missing Translation Error"

# Rendered with (identifier, language) when a lookup misses
DEFAULT_SEED: Dict[str, Dict[str, str]] = {
    MISSING_TRANSLATION_ERROR: {
        "en": "Translation '$1' for '$2' missing!",
        "de": "Übersetzung '$1' für '$2' fehlt!",
        "ru": "Перевод '$1' для '$2' отсутствует!",
    }
}


class ResolutionState(Enum):
    """Terminal success states of a translation lookup.

    Attributes:
        DIRECT_HIT: The requested identifier exists in the requested language
        FALLBACK_REQUESTED_LANGUAGE: The missing-translation message was
            rendered in the requested language
        FALLBACK_PREFERRED_LANGUAGE: The missing-translation message was
            rendered in the preferred language
    """

    DIRECT_HIT = "direct_hit"
    FALLBACK_REQUESTED_LANGUAGE = "fallback_requested_language"
    FALLBACK_PREFERRED_LANGUAGE = "fallback_preferred_language"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one identifier.

    Attributes:
        text: Final, patched text.
        state: Which step of the fallback chain produced the text.
        language: Language the text is written in.
    """

    text: str
    state: ResolutionState
    language: str

    @property
    def is_fallback(self) -> bool:
        """True when the text is the missing-translation message."""
        return self.state != ResolutionState.DIRECT_HIT

    def __str__(self) -> str:
        return self.text
