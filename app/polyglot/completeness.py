"""Language coverage analysis over a dictionary store.

Nothing here is cached: every query walks the current contents of the store,
so results are always consistent with the latest mutation.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from polyglot.validation import validate_languages

if TYPE_CHECKING:
    from polyglot.store import DictionaryStore


class CompletenessAnalyzer:
    """Derives language coverage sets from a DictionaryStore.

    Attributes:
        store: The store whose contents are analyzed.
    """

    def __init__(self, store: "DictionaryStore"):
        self.store = store

    def _language_sets(self) -> List[set]:
        # A corrupted entry that is not a mapping supports nothing
        return [
            set(entry) if isinstance(entry, Mapping) else set()
            for entry in self.store.snapshot().values()
        ]

    def available_languages(self) -> List[str]:
        """Languages present in at least one entry."""
        languages = set()
        for entry_languages in self._language_sets():
            languages |= entry_languages
        return sorted(languages)

    def fully_supported_languages(self) -> List[str]:
        """Languages present in every entry.

        An empty dictionary supports no language at all.
        """
        language_sets = self._language_sets()
        if not language_sets:
            return []
        return sorted(set.intersection(*language_sets))

    def partly_supported_languages(self) -> List[str]:
        """Languages present in some entries but not in all of them."""
        fully_supported = set(self.fully_supported_languages())
        return [
            language
            for language in self.available_languages()
            if language not in fully_supported
        ]

    def incomplete_translations(
        self, languages: Optional[Iterable[str]] = None
    ) -> Dict[str, List[str]]:
        """Report which of the given languages each identifier is missing.

        Args:
            languages: Language codes to check. Defaults to all available
                languages.

        Returns:
            Identifier -> sorted list of missing languages. Identifiers that
            miss none of the languages are omitted.

        Raises:
            ValidationError: If any language is not a valid code.
        """
        if languages is None:
            languages = self.available_languages()
        wanted = validate_languages(languages)

        report = {}
        identifiers = list(self.store.snapshot())
        for identifier, entry_languages in zip(identifiers, self._language_sets()):
            missing = sorted(set(wanted) - entry_languages)
            if missing:
                report[identifier] = missing
        return report
