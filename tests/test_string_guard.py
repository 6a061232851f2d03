"""String guard clauses.

Tests:
    - Presence checks treat None like the empty string
    - Whitespace checks use str.strip semantics (unicode whitespace included)
    - Length checks pass on None, pattern checks fail on None
    - matches() searches anywhere unless the pattern is anchored
"""
import re

import pytest

from guardr import BoundsViolation, ConstraintKind, ShapeViolation, StringGuard, string


def raises_shape(message: str):
    return pytest.raises(ShapeViolation, match=re.escape(message))


def raises_bounds(message: str):
    return pytest.raises(BoundsViolation, match=re.escape(message))


class TestPresence:

    def test_not_null_or_empty_passes_with_content(self, guard):
        clause = guard.string("x", "name")
        assert clause.not_null_or_empty() is clause

    @pytest.mark.parametrize("value", [None, ""])
    def test_not_null_or_empty_fails_when_absent(self, guard, value):
        with raises_shape("name should not be null or empty."):
            guard.string(value, "name").not_null_or_empty()

    def test_not_null_or_empty_accepts_whitespace(self, guard):
        guard.string("   ", "name").not_null_or_empty()

    @pytest.mark.parametrize("value", [None, ""])
    def test_null_or_empty_passes_when_absent(self, guard, value):
        guard.string(value, "nickname").null_or_empty()

    def test_null_or_empty_fails_with_content(self, guard):
        with raises_shape("nickname should be null or empty."):
            guard.string(" ", "nickname").null_or_empty()

    @pytest.mark.parametrize("value", [None, "", "  ", "\t\n", " "])
    def test_not_null_or_whitespace_fails_on_blank(self, guard, value):
        with raises_shape("title should not be null or whitespace."):
            guard.string(value, "title").not_null_or_whitespace()

    def test_not_null_or_whitespace_passes_with_content(self, guard):
        guard.string("  a  ", "title").not_null_or_whitespace()

    @pytest.mark.parametrize("value", [None, "", " \t "])
    def test_null_or_whitespace_passes_on_blank(self, guard, value):
        guard.string(value, "comment").null_or_whitespace()

    def test_null_or_whitespace_fails_with_content(self, guard):
        with raises_shape("comment should be null or whitespace."):
            guard.string(" hi ", "comment").null_or_whitespace()


class TestLength:

    def test_length_below_limit_passes(self, guard):
        guard.string("Test", "word").length_is_less_than(6)

    def test_length_above_limit_fails(self, guard):
        with raises_bounds("word length must be less than 6."):
            guard.string("Testings", "word").length_is_less_than(6)

    def test_length_equal_to_limit_fails_exclusive_check(self, guard):
        guard.string("abcde", "word").length_is_less_than(6)
        with raises_bounds("word length must be less than 6."):
            guard.string("abcdef", "word").length_is_less_than(6)

    def test_length_equal_to_limit_passes_inclusive_check(self, guard):
        guard.string("abcdef", "word").length_is_less_than_or_equal_to(6)
        with raises_bounds("word length must be less than or equal to 6."):
            guard.string("abcdefg", "word").length_is_less_than_or_equal_to(6)

    def test_none_passes_length_checks(self, guard):
        guard.string(None, "word").length_is_less_than(0).length_is_less_than_or_equal_to(0)


class TestMatches:

    def test_search_semantics(self, guard):
        guard.string("order-1234", "ref").matches(r"\d+")

    def test_anchored_pattern_requires_full_match(self, guard):
        with raises_shape("ref must match the pattern '^\\d+$'."):
            guard.string("order-1234", "ref").matches(r"^\d+$")

    def test_none_always_fails(self, guard):
        with raises_shape("ref must match the pattern '.*'."):
            guard.string(None, "ref").matches(r".*")

    def test_empty_string_matches_permissive_pattern(self, guard):
        guard.string("", "ref").matches(r".*")

    def test_flags_are_applied(self, guard):
        guard.string("ABC", "code").matches(r"^abc$", flags=re.IGNORECASE)

    def test_compiled_pattern_reports_its_source(self, guard):
        pattern = re.compile(r"^[a-z]+$")
        guard.string("abc", "slug").matches(pattern)
        with pytest.raises(ShapeViolation) as exc_info:
            guard.string("ABC", "slug").matches(pattern)
        assert exc_info.value.kind is ConstraintKind.PATTERN_MISMATCH
        assert exc_info.value.operands == ("^[a-z]+$",)


class TestChaining:

    def test_full_chain(self, guard):
        clause = guard.string("alice", "username")
        result = clause.not_null_or_whitespace().length_is_less_than_or_equal_to(32).matches(r"^[a-z]+$")
        assert result is clause
        assert result.value == "alice"

    def test_chain_stops_at_first_failure(self, guard):
        with pytest.raises(ShapeViolation) as exc_info:
            guard.string("", "username").not_null_or_empty().length_is_less_than(0)
        assert exc_info.value.kind is ConstraintKind.NOT_NULL_OR_EMPTY


def test_module_shortcut_captures_label():
    username = "Testings"
    with raises_bounds("username length must be less than 6."):
        string(username).length_is_less_than(6)
    assert isinstance(string(None), StringGuard)
