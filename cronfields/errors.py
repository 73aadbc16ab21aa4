"""Errors raised while parsing schedule expressions.

Every error is a ``ValueError`` so callers that only care about "invalid
input" can catch that, while callers that want to report the exact failure
can catch the specific subclass. Messages are meant for direct display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Bound, FieldKind

PREFIX = "cron-schedule error"


class ScheduleError(ValueError):
    """Base class for all parse failures.

    Attributes:
        code: The offending text (a whole expression, field, or token)
        field: The field kind being parsed when the error was raised, if known
    """

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)

        self.code = code
        self.field: FieldKind | None = None


class FieldCountError(ScheduleError):
    """Raised when an expression doesn't split into exactly five fields."""

    def __init__(self, code: str, count: int) -> None:
        super().__init__(
            f"{PREFIX} - invalid timecode - Must be 5 whitespace-delimited fields, "
            f"got {count}: {code!r}",
            code=code,
        )

        self.count = count


class TokenSyntaxError(ScheduleError):
    """Raised when a token matches none of the literal, range, or step grammars."""

    def __init__(self, token: str, reason: str | None = None) -> None:
        message = f"{PREFIX} - timecode parse error - Unexpected token {token}"

        if reason:
            message = f"{message} ({reason})"

        super().__init__(message, code=token)

        self.token = token


class EmptyResultError(ScheduleError):
    """Raised when a field's tokens expand to no values at all."""

    def __init__(self, code: str) -> None:
        super().__init__(
            f"{PREFIX} - timecode parse error - "
            f"Code {code} corresponds to no matching times",
            code=code,
        )


class OutOfBoundError(ScheduleError):
    """Raised when no value of a field survives clamping to its bound."""

    def __init__(self, code: str, bound: Bound) -> None:
        super().__init__(
            f"{PREFIX} - timecode parse error - Code {code} corresponds to "
            f"no matching times between {bound.min} and {bound.max}",
            code=code,
        )

        self.bound = bound
