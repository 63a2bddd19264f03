"""Polyglot - in-memory multilingual text dictionary.

Stores one translation per (identifier, language) pair, keeps track of which
languages every entry supports, and compiles ``$N`` placeholder templates.

Main components:
- store: DictionaryStore with add/has and the override policy
- completeness: CompletenessAnalyzer for language coverage reports
- patcher: patch() placeholder substitution
- preferred: PreferredLanguageGuard for the default language
- resolver: TranslationResolver with the missing-translation fallback chain
- engine: Polyglot facade tying the components together
- factory: new_engine() for seeded, configured engines
"""

from polyglot.completeness import CompletenessAnalyzer
from polyglot.engine import Polyglot
from polyglot.errors import (
    ConflictError,
    ConsistencyError,
    PolyglotError,
    ValidationError,
)
from polyglot.factory import new_engine
from polyglot.models import (
    DEFAULT_SEED,
    MISSING_TRANSLATION_ERROR,
    Resolution,
    ResolutionState,
)
from polyglot.patcher import patch
from polyglot.preferred import PreferredLanguageGuard
from polyglot.resolver import TranslationResolver
from polyglot.store import DictionaryStore

__all__ = [
    "Polyglot",
    "new_engine",
    "DictionaryStore",
    "CompletenessAnalyzer",
    "PreferredLanguageGuard",
    "TranslationResolver",
    "patch",
    "Resolution",
    "ResolutionState",
    "MISSING_TRANSLATION_ERROR",
    "DEFAULT_SEED",
    "PolyglotError",
    "ValidationError",
    "ConflictError",
    "ConsistencyError",
]
