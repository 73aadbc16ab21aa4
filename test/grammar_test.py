import pytest

from cronfields._grammar import (
    MATCHERS,
    match_literal,
    match_range,
    match_step_range,
    parse_literal,
)
from cronfields.errors import TokenSyntaxError
from cronfields.types import NOT_MATCHED, Malformed, Matched


class TestParseLiteral:
    def test_unsigned_digits(self):
        assert parse_literal("0") == 0
        assert parse_literal("07") == 7
        assert parse_literal("59") == 59

    @pytest.mark.parametrize("text", ["", "-1", "+1", " 1", "1 ", "1_000", "a", "٣"])
    def test_everything_else_is_rejected(self, text):
        assert parse_literal(text) is None


class TestMatchLiteral:
    def test_matching(self):
        assert list(match_literal("12").values) == [12]
        assert match_literal("1-2") is NOT_MATCHED


class TestMatchRange:
    def test_ascending(self):
        assert list(match_range("3-5").values) == [3, 4, 5]

    def test_descending_is_normalized(self):
        assert list(match_range("5-3").values) == [3, 4, 5]

    def test_equal_ends(self):
        assert list(match_range("4-4").values) == [4]

    def test_wide_ranges_are_not_expanded(self):
        assert match_range("0-99999999999") == Matched(range(0, 100_000_000_000))

    @pytest.mark.parametrize("token", ["3", "3-", "-3", "1-2-3", "a-b", "0-10/2"])
    def test_wrong_shapes_are_not_matched(self, token):
        assert match_range(token) is NOT_MATCHED


class TestMatchStepRange:
    def test_stepping(self):
        assert list(match_step_range("0-10/2").values) == [0, 2, 4, 6, 8, 10]
        assert list(match_step_range("0-10/3").values) == [0, 3, 6, 9]

    def test_step_larger_than_range(self):
        assert list(match_step_range("5-10/20").values) == [5]

    def test_start_after_end_is_empty(self):
        assert list(match_step_range("10-5/2").values) == []

    def test_zero_step_is_malformed(self):
        outcome = match_step_range("0-10/0")

        assert isinstance(outcome, Malformed)
        assert isinstance(outcome.error, TokenSyntaxError)
        assert outcome.error.token == "0-10/0"

    @pytest.mark.parametrize(
        "token", ["0/2", "0-10", "0-10/", "0-/2", "a-10/2", "0-10/2/2", "0-1-10/2"]
    )
    def test_wrong_shapes_are_not_matched(self, token):
        assert match_step_range(token) is NOT_MATCHED


class TestMatcherOrder:
    def test_literal_then_range_then_step(self):
        assert MATCHERS == (match_literal, match_range, match_step_range)
