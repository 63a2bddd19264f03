"""Preferred language selection.

The preferred language is the engine default and the language of last resort
for the missing-translation message, so it may only point at a language that
every entry supports.
"""

from typing import Optional

from core.logging import get_module_logger
from polyglot.completeness import CompletenessAnalyzer
from polyglot.errors import ConsistencyError
from polyglot.validation import validate_language

logger = get_module_logger(__name__)


class PreferredLanguageGuard:
    """Holds the selected default language of one engine."""

    def __init__(self, analyzer: CompletenessAnalyzer):
        self.analyzer = analyzer
        self._language: Optional[str] = None

    def get(self) -> Optional[str]:
        """Return the preferred language, or None.

        A language that is no longer available in any entry reads as None.
        """
        if self._language not in self.analyzer.available_languages():
            return None
        return self._language

    def set(self, language: str) -> str:
        """Select a new preferred language.

        Raises:
            ValidationError: If language is not a valid code.
            ConsistencyError: If language is not fully supported. The error
                carries the identifiers that still miss it.
        """
        validate_language(language)

        if language not in self.analyzer.fully_supported_languages():
            incomplete = self.analyzer.incomplete_translations([language])
            logger.warning(
                "preferred_language_rejected",
                language=language,
                incomplete=incomplete,
            )
            raise ConsistencyError(
                f"Missing translations for '{language}' on existing entries "
                f"{incomplete}!",
                language=language,
                incomplete=incomplete,
            )

        previous = self._language
        self._language = language
        logger.info(
            "preferred_language_changed", language=language, previous=previous
        )
        return language
