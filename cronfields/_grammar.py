from __future__ import annotations

from typing import Callable

from .errors import TokenSyntaxError
from .types import NOT_MATCHED, Malformed, Matched, Outcome

RANGE_SEP = "-"
STEP_SEP = "/"

type Matcher = Callable[[str], Outcome]


def parse_literal(text: str) -> int | None:
    """Convert an unsigned decimal string into an int, or None if it isn't one."""
    if text and text.isascii() and text.isdigit():
        return int(text)

    return None


def match_literal(token: str) -> Outcome:
    value = parse_literal(token)

    if value is None:
        return NOT_MATCHED

    return Matched(range(value, value + 1))


def match_range(token: str) -> Outcome:
    """Match ``A-B``, expanding to every value between A and B inclusive.

    Reversed ranges are tolerated: ``5-3`` expands to the same ascending
    values as ``3-5``.
    """
    match token.split(RANGE_SEP):
        case [head, tail]:
            start = parse_literal(head)
            end = parse_literal(tail)
        case _:
            return NOT_MATCHED

    if start is None or end is None:
        return NOT_MATCHED

    low, high = min(start, end), max(start, end)

    return Matched(range(low, high + 1))


def match_step_range(token: str) -> Outcome:
    """Match ``A-B/S``, expanding to A, A+S, A+2S... while the value is <= B.

    A start beyond the end matches with no values at all; it's up to the
    field parser to decide whether that's acceptable.
    """
    match token.split(RANGE_SEP):
        case [head, tail]:
            start = parse_literal(head)
        case _:
            return NOT_MATCHED

    if start is None:
        return NOT_MATCHED

    match tail.split(STEP_SEP):
        case [end_text, step_text]:
            end = parse_literal(end_text)
            step = parse_literal(step_text)
        case _:
            return NOT_MATCHED

    if end is None or step is None:
        return NOT_MATCHED

    if step <= 0:
        return Malformed(TokenSyntaxError(token, "step must be a positive integer"))

    return Matched(range(start, end + 1, step))


# Order matters, a step range only matches after the plain range grammar
# rejects the trailing "/S".
MATCHERS: tuple[Matcher, ...] = (match_literal, match_range, match_step_range)
