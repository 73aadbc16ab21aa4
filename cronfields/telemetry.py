"""Lightweight event instrumentation for cronfields.

Handlers are attached by id to one or more event names and are called with
``(name, metadata)`` whenever a matching event executes. Parsing emits the
``cronfields.schedule.parse`` span:

- ``cronfields.schedule.parse.start``: ``{"input", "monotonic_time"}``
- ``cronfields.schedule.parse.stop``: adds ``duration`` and per-field counts
- ``cronfields.schedule.parse.exception``: adds ``duration``, ``error_type``,
  ``error_message``, and ``traceback``

Example:
    >>> from cronfields import telemetry
    >>>
    >>> def handler(name, metadata):
    ...     print(name, metadata["duration"])
    ...
    >>> telemetry.attach("my-handler", ["cronfields.schedule.parse.stop"], handler)
"""

from __future__ import annotations

import logging
import time
import traceback

from contextlib import contextmanager
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)

type Handler = Callable[[str, dict[str, Any]], None]

_handlers: dict[str, tuple[frozenset[str], Handler]] = {}

DEFAULT_LOGGER_ID = "cronfields-default-logger"


class Collector:
    """Gathers extra metadata inside a span to be reported on stop."""

    def __init__(self) -> None:
        self.metadata: dict[str, Any] = {}

    def add(self, metadata: dict[str, Any]) -> None:
        self.metadata.update(metadata)


def attach(handler_id: str, events: list[str], handler: Handler) -> None:
    """Attach a handler to the given event names, replacing any with the same id."""
    _handlers[handler_id] = (frozenset(events), handler)


def detach(handler_id: str) -> None:
    _handlers.pop(handler_id, None)


def execute(name: str, metadata: dict[str, Any]) -> None:
    """Call every handler attached to ``name``.

    A failing handler is logged and skipped so that instrumentation can never
    change the outcome of the instrumented code.
    """
    for handler_id, (events, handler) in list(_handlers.items()):
        if name not in events:
            continue

        try:
            handler(name, metadata)
        except Exception:
            logger.exception("telemetry handler %r failed for %s", handler_id, name)


@contextmanager
def span(prefix: str, metadata: dict[str, Any]) -> Iterator[Collector]:
    start_time = time.monotonic_ns()
    collector = Collector()

    execute(f"{prefix}.start", {**metadata, "monotonic_time": start_time})

    try:
        yield collector
    except Exception as error:
        execute(
            f"{prefix}.exception",
            {
                **metadata,
                **collector.metadata,
                "duration": time.monotonic_ns() - start_time,
                "error_type": type(error).__name__,
                "error_message": str(error),
                "traceback": traceback.format_exc(),
            },
        )

        raise

    execute(
        f"{prefix}.stop",
        {
            **metadata,
            **collector.metadata,
            "duration": time.monotonic_ns() - start_time,
        },
    )


def attach_default_logger(level: int = logging.INFO) -> None:
    """Log parse stop and exception events through the standard logging module."""

    def handler(name: str, metadata: dict[str, Any]) -> None:
        duration_us = metadata["duration"] // 1_000

        if name.endswith(".exception"):
            logger.log(
                level,
                "[%s] %r failed after %dus: %s",
                name,
                metadata.get("input"),
                duration_us,
                metadata["error_message"],
            )
        else:
            logger.log(
                level,
                "[%s] %r parsed in %dus",
                name,
                metadata.get("input"),
                duration_us,
            )

    attach(
        DEFAULT_LOGGER_ID,
        ["cronfields.schedule.parse.stop", "cronfields.schedule.parse.exception"],
        handler,
    )


def detach_default_logger() -> None:
    detach(DEFAULT_LOGGER_ID)
