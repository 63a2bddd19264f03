"""Tests for polyglot.patcher module."""

import pytest

from polyglot.errors import ValidationError
from polyglot.patcher import patch, placeholders


class TestPlaceholders:
    """Tests for placeholder discovery."""

    def test_distinct_and_sorted_numerically(self):
        """Numbers are de-duplicated and sorted as integers."""
        assert placeholders("$10 $2 $1 $2") == [1, 2, 10]

    def test_no_placeholders(self):
        assert placeholders("Plain text") == []

    def test_dollar_without_number(self):
        assert placeholders("Costs $ 5 or $x") == []


class TestPatch:
    """Tests for patch()."""

    def test_text_without_placeholders(self):
        """Text without placeholders is returned unchanged."""
        assert patch("Simple message") == "Simple message"

    def test_extra_substitutions_ignored(self):
        assert patch("Simple message", "unused") == "Simple message"

    def test_single_placeholder(self):
        assert patch("Hello $1", "World") == "Hello World"

    def test_repeated_placeholder(self):
        """Every occurrence of a number gets the same value."""
        result = patch(
            "Welcome back, $1. There are $2 messages for you, $1.", "Eric", 2
        )
        assert result == "Welcome back, Eric. There are 2 messages for you, Eric."

    def test_values_converted_to_string(self):
        assert patch("Count: $1", 42) == "Count: 42"

    def test_falsy_values_are_substituted(self):
        """0, False and empty strings are real values, only None skips."""
        assert patch("$1|$2|$3", 0, False, "") == "0|False|"

    def test_none_keeps_placeholder(self):
        assert patch("$1 $2", "Hello", None, "World") == "Hello $2"

    def test_gap_in_numbering(self):
        """Unused numbers can be skipped with None."""
        result = patch(
            "Hello, my name is $1 and I'm feeling $3 today!", "Sam", None, "great"
        )
        assert result == "Hello, my name is Sam and I'm feeling great today!"

    def test_placeholder_beyond_substitutions_kept(self):
        """A placeholder numbered past the last substitution stays literal."""
        assert patch("$1 and $3", "one", "two") == "one and $3"

    def test_out_of_range_placeholder_repeated(self):
        assert patch("$5 $1 $5", "x", None) == "$5 x $5"

    def test_lowest_placeholder_above_one(self):
        """Substitution k always fills $k, earlier slots can be None."""
        assert patch("Only $2 here", None, "two") == "Only two here"

    def test_double_digit_placeholders(self):
        values = [str(n) for n in range(1, 13)]
        text = " ".join(f"${n}" for n in range(1, 13))
        assert patch(text, *values) == " ".join(values)

    def test_substituted_values_not_rescanned(self):
        """A value containing a placeholder is not patched again."""
        assert patch("$1 $2", "$2", "two") == "$2 two"

    def test_invalid_text(self):
        with pytest.raises(ValidationError, match="Invalid value"):
            patch(None)

    def test_missing_substitution(self):
        with pytest.raises(ValidationError, match="Mismatch between placeholders"):
            patch("Hello $1")

    def test_fewer_substitutions_than_placeholders(self):
        with pytest.raises(ValidationError, match="Mismatch between placeholders"):
            patch("$1 $2", "Hello")

    def test_numbering_must_start_at_one(self):
        with pytest.raises(ValidationError, match=r"must start with \$1"):
            patch("Hello $0", "World")

    def test_numbering_is_anchored_at_one(self):
        """Two values for "$2 $3" do not shift onto $2 and $3."""
        assert patch("$2 $3", "a", "b") == "b $3"
        assert patch("$2 $3", "a", "b", "c") == "b c"

    def test_more_distinct_placeholders_than_substitutions(self):
        with pytest.raises(ValidationError, match="Mismatch between placeholders"):
            patch("$1 $2 $3", "a", "b")


class TestPatchComposition:
    """Staged compilation gives the same result as a single pass."""

    @pytest.mark.parametrize(
        "text",
        [
            "Hello, my name is $1 and I'm feeling $2 today!",
            "$2 before $1, then $1 again",
            "$1$2$1",
        ],
    )
    def test_two_passes_equal_one(self, text):
        staged = patch(patch(text, "Eric", None), None, "awesome")
        assert staged == patch(text, "Eric", "awesome")

    def test_nested_example(self):
        first = patch("Hello, my name is $1 and I'm feeling $2 today!", "Eric", None)
        assert first == "Hello, my name is Eric and I'm feeling $2 today!"
        assert patch(first, None, "awesome") == (
            "Hello, my name is Eric and I'm feeling awesome today!"
        )
