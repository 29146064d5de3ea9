"""
Main Logger class

Builds one record per call and hands it to the dispatch core, either
inline (synchronous) or through an AsyncPipeline (asynchronous).
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from slogger.core.dispatch import dispatch
from slogger.core.log_level import LogLevel
from slogger.core.log_record import LogRecord
from slogger.core.pipeline import AsyncPipeline, get_default_pipeline
from slogger.core.source import capture_source

# Frames between the application call site and Logger._log: the public
# method (debug/info/warn/error/log) and _log itself. Every public entry
# point must call _log directly.
CALLER_DEPTH = 2


class Logger:
    """
    Structured logger fanning records out to several handlers.

    Logging calls never raise: handler failures are reported on the
    "slogger" standard library logger and delivery continues.
    """

    def __init__(
        self,
        handlers: Sequence[Any],
        async_mode: bool = False,
        pipeline: Optional[AsyncPipeline] = None
    ):
        """
        Initialize logger.

        Args:
            handlers: Handlers in delivery order
            async_mode: Deliver through a background worker
            pipeline: Pipeline used in async mode (default: the
                      process-wide pipeline, started if needed). The
                      pipeline is bound here; if it is later closed,
                      records are delivered inline
        """
        self._handlers: Tuple[Any, ...] = tuple(handlers)
        self._async = async_mode
        self._pipeline: Optional[AsyncPipeline] = None

        if async_mode:
            if pipeline is None:
                pipeline = get_default_pipeline()
            self._pipeline = pipeline.start()

    @property
    def handlers(self) -> Tuple[Any, ...]:
        return self._handlers

    @property
    def is_async(self) -> bool:
        return self._async

    @property
    def pipeline(self) -> Optional[AsyncPipeline]:
        return self._pipeline

    def _log(self, level: LogLevel, message: str, attrs: dict) -> None:
        """Build a record for the caller CALLER_DEPTH frames up and dispatch it."""
        record = LogRecord(
            level=level,
            message=message,
            attrs=tuple(attrs.items()),
            source=capture_source(CALLER_DEPTH),
        )
        dispatch(self._handlers, record, self._pipeline)

    def log(self, level: LogLevel, message: str, /, **attrs) -> None:
        """Log a message at the given level."""
        self._log(level, message, attrs)

    def debug(self, message: str, /, **attrs) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message, attrs)

    def info(self, message: str, /, **attrs) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message, attrs)

    def warn(self, message: str, /, **attrs) -> None:
        """Log warning message."""
        self._log(LogLevel.WARN, message, attrs)

    def error(self, message: str, /, **attrs) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message, attrs)

    def flush(self) -> None:
        """
        Flush all handlers.

        In async mode records already accepted by the pipeline may still
        be in flight; close the pipeline to wait for them.
        """
        for handler in self._handlers:
            if hasattr(handler, 'flush'):
                handler.flush()

    def shutdown(self) -> None:
        """Flush and close all handlers. The shared pipeline is left running."""
        for handler in self._handlers:
            if hasattr(handler, 'flush'):
                handler.flush()
            if hasattr(handler, 'close'):
                handler.close()

    def __repr__(self) -> str:
        mode = "async" if self._async else "sync"
        return f"Logger(mode={mode}, handlers={list(self._handlers)})"
