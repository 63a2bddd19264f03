"""Identifier -> language -> text storage.

The store is the only mutable state of an engine. Entries are created on the
first add for an identifier and grow one language at a time; an existing
(identifier, language) pair is only replaced on explicit override.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Optional

from core.logging import get_module_logger
from polyglot.completeness import CompletenessAnalyzer
from polyglot.errors import ConflictError, ConsistencyError, ValidationError
from polyglot.validation import validate_identifier, validate_language, validate_text

logger = get_module_logger(__name__)

OVERRIDE_POLICIES = ("raise", "warn")


class DictionaryStore:
    """Owns the identifier -> language -> text mapping.

    Attributes:
        override_policy: What an explicit override does when its language is
            only partly supported. "raise" refuses with ConsistencyError,
            "warn" logs the incomplete coverage and writes anyway.
        analyzer: CompletenessAnalyzer over this store.
    """

    def __init__(self, override_policy: str = "raise"):
        if override_policy not in OVERRIDE_POLICIES:
            raise ValueError(
                f"Unknown override policy '{override_policy}', "
                f"expected one of {OVERRIDE_POLICIES}"
            )
        self.override_policy = override_policy
        self.analyzer = CompletenessAnalyzer(self)
        self._entries: Dict[str, Dict[str, str]] = {}

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def has(self, identifier: str, language: str) -> bool:
        """Check if a non-empty translation exists for identifier in language.

        Raises:
            ValidationError: If identifier or language is malformed.
        """
        validate_language(language)
        validate_identifier(identifier)
        entry = self._entries.get(identifier)
        if not isinstance(entry, Mapping):
            return False
        text = entry.get(language)
        return isinstance(text, str) and bool(text)

    def add(
        self,
        identifier: Any,
        text: Optional[str] = None,
        language: Optional[str] = None,
        override: bool = False,
    ):
        """Add one translation, or a whole bulk mapping.

        Called as ``add(identifier, text, language)`` it stores a single
        translation and returns its text. Called as ``add(mapping)`` with a
        two-level ``{identifier: {language: text}}`` mapping it behaves like
        add_all() and returns the number of translations written.

        Raises:
            ValidationError: On malformed identifier, language or text.
            ConflictError: If the pair exists and override is False.
            ConsistencyError: If an override touches a partly supported
                language and the override policy is "raise".
        """
        if isinstance(identifier, Mapping) and text is None and language is None:
            return self.add_all(identifier, override=override)

        validate_identifier(identifier)
        validate_language(language)
        validate_text(text)

        exists = self.has(identifier, language)
        if exists and not override:
            logger.warning(
                "translation_conflict", identifier=identifier, language=language
            )
            raise ConflictError(
                f"Conflicting translation with identifier '{identifier}' "
                f"and language '{language}'!",
                identifier=identifier,
                language=language,
            )

        if exists and language not in self.analyzer.fully_supported_languages():
            self._check_override_coverage(identifier, language)

        self._entries.setdefault(identifier, {})[language] = text
        logger.debug(
            "translation_added",
            identifier=identifier,
            language=language,
            override=exists,
        )
        return text

    def add_all(self, translations: Mapping, override: bool = False) -> int:
        """Add every translation of a ``{identifier: {language: text}}`` mapping.

        Additive, never destructive: existing entries stay in place. The
        first failing translation aborts the call; translations written
        before it are kept.

        Returns:
            Number of translations written.

        Raises:
            ValidationError: If translations is not a two-level mapping, or
                any identifier, language or text is malformed.
            ConflictError: As for add().
            ConsistencyError: As for add().
        """
        if not isinstance(translations, Mapping):
            raise ValidationError(f"Malformed translation mapping {translations!r}!")

        written = 0
        for identifier, entry in translations.items():
            if not isinstance(entry, Mapping):
                raise ValidationError(
                    f"Malformed translations {entry!r} for identifier '{identifier}'!"
                )
            for language, text in entry.items():
                self.add(identifier, text, language, override=override)
                written += 1

        logger.info("translations_added", count=written, override=override)
        return written

    def snapshot(self) -> Mapping:
        """Read-only view of the live dictionary."""
        return MappingProxyType(self._entries)

    def entry(self, identifier: str) -> Dict[str, str]:
        """Copy of all translations of one identifier.

        Raises:
            KeyError: If the identifier has no entry.
        """
        return dict(self._entries[identifier])

    def identifiers(self) -> List[str]:
        """All stored identifiers in insertion order."""
        return list(self._entries)

    def _check_override_coverage(self, identifier: str, language: str) -> None:
        incomplete = self.analyzer.incomplete_translations([language])
        log = logger.bind(
            identifier=identifier,
            language=language,
            incomplete=incomplete,
            policy=self.override_policy,
        )
        if self.override_policy == "warn":
            log.warning("override_of_partly_supported_language")
            return

        log.error("override_of_partly_supported_language")
        raise ConsistencyError(
            f"Explicit override of {{'{identifier}': '{language}'}} reports other "
            f"missing translations for '{language}' on existing entries {incomplete}!",
            language=language,
            incomplete=incomplete,
        )
