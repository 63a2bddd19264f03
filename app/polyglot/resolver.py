"""Translation lookup with missing-translation fallback.

Resolution order:
1. The identifier in the requested language
2. The missing-translation message in the requested language
3. The missing-translation message in the preferred language

The fallback message is patched with (identifier, language) so it can name
what was missing. If even step 3 fails the reserved entry is corrupt and a
ConsistencyError is raised.
"""

from typing import Any, Optional

from core.logging import get_module_logger
from polyglot.errors import ConsistencyError
from polyglot.models import MISSING_TRANSLATION_ERROR, Resolution, ResolutionState
from polyglot.patcher import patch
from polyglot.preferred import PreferredLanguageGuard
from polyglot.store import DictionaryStore
from polyglot.validation import validate_language

logger = get_module_logger(__name__)


class TranslationResolver:
    """Resolves identifiers to patched text.

    Attributes:
        store: DictionaryStore holding the translations.
        preferred: PreferredLanguageGuard supplying the default language.
    """

    def __init__(self, store: DictionaryStore, preferred: PreferredLanguageGuard):
        self.store = store
        self.preferred = preferred

    def resolve(
        self,
        identifier: str,
        language: Optional[str] = None,
        *substitutions: Any,
    ) -> Resolution:
        """Look up identifier in language and patch it with substitutions.

        Args:
            identifier: Translation identifier.
            language: Requested language. None means the preferred language.
            *substitutions: Values for the ``$N`` placeholders. Ignored when
                the missing-translation message is returned.

        Returns:
            Resolution with the text and the fallback step that produced it.

        Raises:
            ValidationError: On malformed identifier, language or
                substitutions.
            ConsistencyError: If no language was given and no preferred
                language is set, or if the missing-translation message is not
                available in the preferred language.
        """
        if language is None:
            language = self.preferred.get()
            if language is None:
                logger.error("no_language_to_resolve", identifier=identifier)
                raise ConsistencyError(
                    f"Cannot translate '{identifier}' without a language, "
                    "no preferred language is set!"
                )
        validate_language(language)

        if self.store.has(identifier, language):
            text = self.store.snapshot()[identifier][language]
            return Resolution(
                text=patch(text, *substitutions),
                state=ResolutionState.DIRECT_HIT,
                language=language,
            )

        log = logger.bind(identifier=identifier, language=language)

        if self.store.has(MISSING_TRANSLATION_ERROR, language):
            log.warning("translation_missing")
            return self._fallback(
                identifier,
                language,
                language,
                ResolutionState.FALLBACK_REQUESTED_LANGUAGE,
            )

        preferred = self.preferred.get()
        if preferred is None or not self.store.has(
            MISSING_TRANSLATION_ERROR, preferred
        ):
            incomplete = self.store.analyzer.incomplete_translations(
                [preferred] if preferred else []
            )
            log.error(
                "fallback_translation_missing",
                preferred_language=preferred,
                incomplete=incomplete,
            )
            raise ConsistencyError(
                f"Missing translations for '{preferred}' on existing entries "
                f"{incomplete}! '{MISSING_TRANSLATION_ERROR}' must cover the "
                "preferred language.",
                language=preferred,
                incomplete=incomplete,
            )

        log.warning("translation_missing", fallback_language=preferred)
        return self._fallback(
            identifier,
            language,
            preferred,
            ResolutionState.FALLBACK_PREFERRED_LANGUAGE,
        )

    def _fallback(
        self,
        identifier: str,
        language: str,
        message_language: str,
        state: ResolutionState,
    ) -> Resolution:
        text = self.store.snapshot()[MISSING_TRANSLATION_ERROR][message_language]
        return Resolution(
            text=patch(text, identifier, language),
            state=state,
            language=message_language,
        )
