from __future__ import annotations

from . import telemetry
from ._grammar import MATCHERS
from .errors import (
    EmptyResultError,
    FieldCountError,
    OutOfBoundError,
    ScheduleError,
    TokenSyntaxError,
)
from .types import Bound, FieldKind, Malformed, Matched, Schedule

FIELD_SEP = " "
TOKEN_SEP = ","
WILDCARD = "*"

# Wider than any field's bound, the clamp in parse_time_code trims it down
WILDCARD_RANGE = "0-60"


def parse_field(code: str) -> list[int]:
    """Expand a comma separated field into its values, in the order written.

    No bound is applied here and duplicates across tokens are kept.

    Raises:
        TokenSyntaxError: If a token matches none of the token grammars
        EmptyResultError: If the tokens expand to no values at all
    """
    return [value for token_range in _parse_ranges(code) for value in token_range]


def _parse_ranges(code: str) -> list[range]:
    ranges = [_parse_token(token) for token in code.split(TOKEN_SEP)]

    if not any(ranges):
        raise EmptyResultError(code)

    return ranges


def _parse_token(token: str) -> range:
    for matcher in MATCHERS:
        match matcher(token):
            case Matched(values):
                return values
            case Malformed(error):
                raise error

    raise TokenSyntaxError(token)


def parse_time_code(code: str, min: int, max: int) -> list[int]:
    """Parse a single field and clamp its values to ``[min, max]``.

    A wildcard is rewritten to an explicit range before tokenizing, so ``*``
    and ``*/15`` go through the ordinary range and step grammars.

    Args:
        code: The raw text of one field, e.g. ``"*/15"`` or ``"1-5,10"``
        min: The smallest legal value, inclusive
        max: The largest legal value, inclusive

    Returns:
        The values within the bound, in the order they were written

    Raises:
        ScheduleError: If the field can't be parsed or nothing is left in range

    Example:
        >>> parse_time_code("*/20", 0, 59)
        [0, 20, 40]
    """
    if min > max:
        raise ValueError(f"min ({min}) must be less than or equal to max ({max})")

    bound = Bound(min, max)
    expanded = code.replace(WILDCARD, WILDCARD_RANGE)

    values = [
        value
        for token_range in _parse_ranges(expanded)
        for value in bound.clip(token_range)
    ]

    if not values:
        raise OutOfBoundError(code, bound)

    return values


def parse_schedule(code: str) -> Schedule:
    """Parse a full five field expression into a Schedule.

    Fields are separated by single spaces and parsed in order; parsing stops
    at the first field that fails, and that field's error is raised as is
    with its ``field`` attribute set.

    Raises:
        FieldCountError: If there aren't exactly five fields
        ScheduleError: If any field fails to parse

    Example:
        >>> parse_schedule("0 0 1 1 *").weekdays
        (0, 1, 2, 3, 4, 5, 6)
    """
    with telemetry.span("cronfields.schedule.parse", {"input": code}) as context:
        fields = code.split(FIELD_SEP)

        if len(fields) != len(FieldKind):
            raise FieldCountError(code, len(fields))

        parsed = [_parse_kind(field, kind) for field, kind in zip(fields, FieldKind)]

        context.add(
            {f"{kind}_count": len(values) for kind, values in zip(FieldKind, parsed)}
        )

    return Schedule(code, *parsed)


def _parse_kind(code: str, kind: FieldKind) -> tuple[int, ...]:
    bound = kind.bound

    try:
        return tuple(parse_time_code(code, bound.min, bound.max))
    except ScheduleError as error:
        error.field = kind
        raise
