"""Validation functions for dictionary input.

Provides validation for:
- Translation identifiers
- Language codes (two lowercase ASCII letters)
- Translation text values
- Language lists passed to completeness queries

All validators raise ValidationError with descriptive messages and return
the validated value on success.
"""

import re
from collections.abc import Iterable
from typing import Any, List

from core.logging import get_module_logger
from polyglot.errors import ValidationError

logger = get_module_logger(__name__)

LANGUAGE_CODE_REGEX = re.compile(r"[a-z]{2}")

# Letters, digits, underscore, plain space and a punctuation allow-list
IDENTIFIER_REGEX = re.compile(r"[\w ,.:;!?'\"()\[\]{}\-/&+#@*]{3,}")


def is_language_code(value: Any) -> bool:
    """Check whether value is a two-letter lowercase language code."""
    return isinstance(value, str) and bool(LANGUAGE_CODE_REGEX.fullmatch(value))


def is_identifier(value: Any) -> bool:
    """Check whether value is a well-formed translation identifier.

    Examples:
        >>> is_identifier("Missing Translation Error")
        True
        >>> is_identifier("123, Foo?-(Bar)_[B:A.Z]!")
        True
        >>> is_identifier("ab")
        False
        >>> is_identifier("\\n\\t ")
        False
    """
    if not isinstance(value, str) or not IDENTIFIER_REGEX.fullmatch(value):
        return False
    # At least one letter or digit, "???" is not a name
    return any(char.isalnum() for char in value)


def validate_language(language: Any) -> str:
    """Validate a language code.

    Raises:
        ValidationError: If language is not two lowercase ASCII letters.
    """
    if not is_language_code(language):
        raise ValidationError(f"Invalid language code '{language}'!")
    return language


def validate_identifier(identifier: Any) -> str:
    """Validate a translation identifier.

    Raises:
        ValidationError: If identifier is not a string of at least three
            allowed characters.
    """
    if not is_identifier(identifier):
        raise ValidationError(f"Invalid translation identifier '{identifier}'!")
    return identifier


def validate_text(text: Any) -> str:
    """Validate a translation text value.

    Raises:
        ValidationError: If text is not a non-empty string.
    """
    if not isinstance(text, str) or not text:
        raise ValidationError(f"Malformed translation value {text!r}!")
    return text


def validate_languages(languages: Any) -> List[str]:
    """Validate a sequence of language codes.

    A bare string is rejected, "en" is one language and not a list of two
    characters.

    Raises:
        ValidationError: If languages is not an iterable of valid codes.
    """
    if isinstance(languages, (str, bytes)) or not isinstance(languages, Iterable):
        raise ValidationError(f"Malformed list of languages {languages!r}!")

    result = list(languages)
    invalid = [language for language in result if not is_language_code(language)]
    if invalid:
        logger.warning("invalid_language_list", invalid=invalid)
        raise ValidationError(f"Malformed list of languages {result!r}!")
    return result
