"""Dictionary engine facade.

Wires store, completeness analyzer, preferred-language guard and resolver of
one engine together and exposes them through a single object. Methods stay
bound when taken off the instance, so ``translate = engine.translate`` works
as a free function.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from core.config import PolyglotSettings, settings as app_settings
from core.logging import get_module_logger
from polyglot.models import DEFAULT_SEED, Resolution
from polyglot.patcher import patch as patch_text
from polyglot.preferred import PreferredLanguageGuard
from polyglot.resolver import TranslationResolver
from polyglot.store import DictionaryStore

logger = get_module_logger(__name__)


class Polyglot:
    """In-memory multilingual dictionary.

    A new engine holds the reserved "Missing Translation Error" entry in
    English, German and Russian and prefers English, unless configured
    otherwise.

    Usage:
        engine = Polyglot()
        engine.add("Greeting", "Hello $1", "en")
        engine.translate("Greeting", "en", "World")  # "Hello World"
        engine.translate("Greeting", "fr")
        # "Translation 'Greeting' for 'fr' missing!"

    Attributes:
        store: DictionaryStore with all translations.
        analyzer: CompletenessAnalyzer over the store.
        preferred: PreferredLanguageGuard for the default language.
        resolver: TranslationResolver used by translate().
    """

    def __init__(
        self,
        settings: Optional[PolyglotSettings] = None,
        seed: bool = True,
    ):
        """Initialize the engine.

        Args:
            settings: Engine settings. Defaults to the application settings.
            seed: Whether to load the reserved entry and select the configured
                preferred language. An unseeded engine starts empty and
                has no fallback message.
        """
        self.settings = settings or app_settings.polyglot
        self.store = DictionaryStore(override_policy=self.settings.OVERRIDE_POLICY)
        self.analyzer = self.store.analyzer
        self.preferred = PreferredLanguageGuard(self.analyzer)
        self.resolver = TranslationResolver(self.store, self.preferred)

        if seed:
            self.store.add_all(DEFAULT_SEED)
            self.preferred.set(self.settings.PREFERRED_LANGUAGE)

    def has(self, identifier: str, language: str) -> bool:
        """Check if identifier is translated into language."""
        return self.store.has(identifier, language)

    def add(
        self,
        identifier: Any,
        text: Optional[str] = None,
        language: Optional[str] = None,
        override: bool = False,
    ):
        """Add one translation, or a bulk ``{identifier: {language: text}}``
        mapping. See DictionaryStore.add()."""
        return self.store.add(identifier, text, language, override=override)

    def add_all(self, translations: Mapping, override: bool = False) -> int:
        """Additively merge a bulk mapping into the dictionary."""
        return self.store.add_all(translations, override=override)

    def snapshot(self) -> Mapping:
        """Read-only view of the whole dictionary."""
        return self.store.snapshot()

    def entry(self, identifier: str) -> Dict[str, str]:
        """All translations of one identifier."""
        return self.store.entry(identifier)

    def patch(self, text: str, *substitutions: Any) -> str:
        """Fill ``$N`` placeholders of text. See polyglot.patcher.patch()."""
        return patch_text(text, *substitutions)

    def resolve(
        self, identifier: str, language: Optional[str] = None, *substitutions: Any
    ) -> Resolution:
        """Translate identifier and report which fallback step was used."""
        return self.resolver.resolve(identifier, language, *substitutions)

    def translate(
        self, identifier: str, language: Optional[str] = None, *substitutions: Any
    ) -> str:
        """Translate identifier into language and patch its placeholders.

        Falls back to the missing-translation message when identifier has no
        text in language. Omitting language uses the preferred language.
        """
        return self.resolver.resolve(identifier, language, *substitutions).text

    put = translate

    @property
    def available_languages(self) -> List[str]:
        return self.analyzer.available_languages()

    @property
    def fully_supported_languages(self) -> List[str]:
        return self.analyzer.fully_supported_languages()

    @property
    def partly_supported_languages(self) -> List[str]:
        return self.analyzer.partly_supported_languages()

    @property
    def incomplete_translations(self) -> Dict[str, List[str]]:
        """Identifiers missing any of the available languages."""
        return self.analyzer.incomplete_translations()

    @property
    def preferred_language(self) -> Optional[str]:
        return self.preferred.get()

    def set_preferred_language(self, language: str) -> str:
        """Select the default language. It must be fully supported."""
        return self.preferred.set(language)

    def __repr__(self) -> str:
        return (
            f"Polyglot(identifiers={len(self.store)}, "
            f"languages={self.available_languages}, "
            f"preferred={self.preferred_language!r})"
        )
