from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .errors import TokenSyntaxError

MINUTE_MIN, MINUTE_MAX = 0, 59
HOUR_MIN, HOUR_MAX = 0, 23
DAY_OF_MONTH_MIN, DAY_OF_MONTH_MAX = 1, 31
MONTH_MIN, MONTH_MAX = 1, 12
DAY_OF_WEEK_MIN, DAY_OF_WEEK_MAX = 0, 6


@dataclass(frozen=True, slots=True)
class Bound:
    """An inclusive (min, max) pair of legal values for a field."""

    min: int
    max: int

    def __contains__(self, value: int) -> bool:
        return self.min <= value <= self.max

    def values(self) -> range:
        return range(self.min, self.max + 1)

    def clip(self, values: range) -> range:
        """Narrow an ascending range to the values within this bound.

        Works on the range arithmetically, so the cost doesn't depend on how
        far outside the bound the range reaches.
        """
        window = self.values()
        start = values.start

        if start < window.start:
            skipped = -(-(window.start - start) // values.step)
            start += skipped * values.step

        return range(start, min(values.stop, window.stop), values.step)


class FieldKind(StrEnum):
    """The five positional fields of a schedule expression, in order.

    - MINUTE: 0 through 59
    - HOUR: 0 through 23
    - DAY_OF_MONTH: 1 through 31
    - MONTH: 1 through 12
    - DAY_OF_WEEK: 0 (Sunday) through 6
    """

    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"

    @property
    def bound(self) -> Bound:
        return BOUNDS[self]


BOUNDS = MappingProxyType(
    {
        FieldKind.MINUTE: Bound(MINUTE_MIN, MINUTE_MAX),
        FieldKind.HOUR: Bound(HOUR_MIN, HOUR_MAX),
        FieldKind.DAY_OF_MONTH: Bound(DAY_OF_MONTH_MIN, DAY_OF_MONTH_MAX),
        FieldKind.MONTH: Bound(MONTH_MIN, MONTH_MAX),
        FieldKind.DAY_OF_WEEK: Bound(DAY_OF_WEEK_MIN, DAY_OF_WEEK_MAX),
    }
)


# Token Outcomes


@dataclass(frozen=True, slots=True)
class Matched:
    values: range


@dataclass(frozen=True, slots=True)
class NotMatched:
    pass


@dataclass(frozen=True, slots=True)
class Malformed:
    error: TokenSyntaxError


NOT_MATCHED = NotMatched()

type Outcome = Matched | NotMatched | Malformed


# Schedule


@dataclass(frozen=True, slots=True)
class Schedule:
    """The concrete values matched by each field of a parsed expression."""

    input: str
    """The expression this schedule was parsed from"""

    minutes: tuple[int, ...]
    """Minutes of the hour, within 0-59"""

    hours: tuple[int, ...]
    """Hours of the day, within 0-23"""

    days: tuple[int, ...]
    """Days of the month, within 1-31"""

    months: tuple[int, ...]
    """Months of the year, within 1-12"""

    weekdays: tuple[int, ...]
    """Days of the week, within 0-6"""

    @classmethod
    def parse(cls, input: str) -> Schedule:
        from .parser import parse_schedule

        return parse_schedule(input)

    def fields(self) -> tuple[tuple[int, ...], ...]:
        return (self.minutes, self.hours, self.days, self.months, self.weekdays)

    def as_dict(self) -> dict[str, list[int]]:
        return {
            str(kind): list(values) for kind, values in zip(FieldKind, self.fields())
        }

    def __getitem__(self, index: int) -> tuple[int, ...]:
        return self.fields()[index]

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.fields())

    def __len__(self) -> int:
        return len(FieldKind)
