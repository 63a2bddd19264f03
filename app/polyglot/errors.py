"""Custom exceptions for the dictionary engine.

Every error raised by the engine inherits from PolyglotError so callers can
handle the whole family at once. Lookup misses are never errors; they are
absorbed by the fallback chain of the resolver.
"""

from typing import Dict, List, Optional


class PolyglotError(Exception):
    """Base exception for all dictionary engine errors.

    Example:
        try:
            engine.add("Greeting", "Hello", "en")
        except PolyglotError as e:
            logger.error("dictionary_error", error=str(e))
    """

    pass


class ValidationError(PolyglotError):
    """Raised when an identifier, language code, text or substitution list
    is malformed.

    Always a caller fault. Nothing is written to the dictionary when it is
    raised.

    Example:
        >>> engine.has("Greeting", "EN")
        Traceback (most recent call last):
        ...
        ValidationError: Invalid language code 'EN'!
    """

    pass


class ConflictError(PolyglotError):
    """Raised when adding an (identifier, language) pair that already exists
    without an explicit override.

    Re-issue the call with ``override=True`` to replace the stored text.
    """

    def __init__(self, message: str, identifier: str, language: str):
        super().__init__(message)
        self.identifier = identifier
        self.language = language


class ConsistencyError(PolyglotError):
    """Raised when an operation would break, or already met a broken,
    language-completeness invariant.

    Attributes:
        language: The language whose coverage is incomplete.
        incomplete: Identifier -> missing languages, as reported by
            CompletenessAnalyzer.incomplete_translations([language]).
    """

    def __init__(
        self,
        message: str,
        language: Optional[str] = None,
        incomplete: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message)
        self.language = language
        self.incomplete = incomplete or {}
