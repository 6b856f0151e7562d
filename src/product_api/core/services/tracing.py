"""Span hooks around service use cases.

Services accept any object with a ``span(name, **attributes)`` context manager,
so an APM agent can be plugged in at construction time. ``LogTracer`` is the
built-in implementation and writes spans to loguru.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import TYPE_CHECKING, Any, Protocol

from loguru import logger as default_logger

if TYPE_CHECKING:
    from loguru import Logger


class Tracer(Protocol):
    def span(self, name: str, **attributes: Any) -> AbstractContextManager[None]: ...


class LogTracer:
    """Record each span as a DEBUG ``span.end`` entry with its duration.

    Records emitted inside the span carry ``extra["span"]``.
    """

    def __init__(self, logger: Logger | None = None):
        self._logger = logger or default_logger

    @contextmanager
    def span(self, name: str, **attributes: Any) -> Iterator[None]:
        start = time.perf_counter()
        outcome = "success"
        with default_logger.contextualize(span=name):
            try:
                yield
            except Exception:
                outcome = "error"
                raise
            finally:
                duration_ms = (time.perf_counter() - start) * 1000
                self._logger.bind(
                    span=name,
                    outcome=outcome,
                    duration_ms=round(duration_ms, 1),
                    **attributes,
                ).debug("span.end")
