"""Placeholder substitution for translation texts.

Texts carry numbered placeholders ``$1``, ``$2``, ... that are filled in
positionally: substitution k always fills ``$k``. The same number can appear
any number of times. A substitution of ``None``, or a missing one past the
end, keeps its placeholder in the output, so a text can be compiled in
several passes:

    >>> patch(patch("Hello $1, you have $2 messages", "Eric", None), None, 2)
    'Hello Eric, you have 2 messages'
"""

import re
from typing import Any

from core.logging import get_module_logger
from polyglot.errors import ValidationError

logger = get_module_logger(__name__)

PLACEHOLDER_REGEX = re.compile(r"\$(\d+)")


def placeholders(text: str) -> list[int]:
    """Return the distinct placeholder numbers of text, sorted ascending."""
    return sorted({int(number) for number in PLACEHOLDER_REGEX.findall(text)})


def patch(text: str, *substitutions: Any) -> str:
    """Substitute ``$N`` placeholders in text with substitution values.

    Every ``$N`` is replaced with ``str(substitutions[N - 1])``. A placeholder
    whose value is None, or whose number lies past the last substitution, is
    left untouched.

    Args:
        text: Text with ``$N`` placeholders.
        *substitutions: Values for ``$1``, ``$2``, ...

    Returns:
        The patched text.

    Raises:
        ValidationError: If text is not a string, if a placeholder is
            ``$0``, or if there are more distinct placeholders than
            substitutions.

    Examples:
        >>> patch("Welcome back, $1. There are $2 messages for you, $1.", "Eric", 2)
        'Welcome back, Eric. There are 2 messages for you, Eric.'
        >>> patch("$1 $2", "Hello", None, "World")
        'Hello $2'
        >>> patch("$1 and $3", "one", "two")
        'one and $3'
    """
    if not isinstance(text, str):
        raise ValidationError(f"Invalid value {text!r} for substitution!")

    numbers = placeholders(text)
    if numbers and (numbers[0] < 1 or len(numbers) > len(substitutions)):
        logger.warning(
            "placeholder_mismatch",
            placeholders=[f"${number}" for number in numbers],
            substitution_count=len(substitutions),
        )
        raise ValidationError(
            f"Mismatch between placeholders {['$%d' % n for n in numbers]} "
            f"and substitutions {list(substitutions)!r}! "
            "Placeholder IDs must start with $1 and there must be at least "
            "as many substitutions as distinct placeholders."
        )

    def _replace(match: re.Match) -> str:
        index = int(match.group(1)) - 1
        if index < len(substitutions) and substitutions[index] is not None:
            return str(substitutions[index])
        return match.group(0)

    return PLACEHOLDER_REGEX.sub(_replace, text)
