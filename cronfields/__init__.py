from importlib.metadata import version

from .errors import (
    EmptyResultError,
    FieldCountError,
    OutOfBoundError,
    ScheduleError,
    TokenSyntaxError,
)
from .parser import parse_field, parse_schedule, parse_time_code
from .types import BOUNDS, Bound, FieldKind, Schedule

__all__ = [
    "BOUNDS",
    "Bound",
    "EmptyResultError",
    "FieldCountError",
    "FieldKind",
    "OutOfBoundError",
    "Schedule",
    "ScheduleError",
    "TokenSyntaxError",
    "parse_field",
    "parse_schedule",
    "parse_time_code",
]

__version__ = version("cronfields")
