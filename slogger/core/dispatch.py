"""
Dispatch core

Routes a built record to every handler of a logger, either inline on
the calling thread or through an AsyncPipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Sequence

from slogger.core.errors import QueueClosedError
from slogger.core.log_record import LogRecord

if TYPE_CHECKING:
    from slogger.core.pipeline import AsyncPipeline

# Failures are reported through the standard library logging module,
# never through slogger's own handlers.
diagnostics = logging.getLogger("slogger")


@dataclass(frozen=True)
class DispatchUnit:
    """One handler paired with one record, queued for the worker."""

    handler: Any
    record: LogRecord


def report_failure(error: BaseException) -> None:
    """Report a handler failure once on the "slogger" logger."""
    diagnostics.error("Failed to handle log record: %s", error)


def deliver(handler: Any, record: LogRecord) -> bool:
    """
    Deliver a record to a single handler.

    The handler is skipped when it is not enabled for the record's
    level. Exceptions from the handler are reported and swallowed.

    Args:
        handler: Object with enabled(level) and handle(record) methods
        record: Record to deliver

    Returns:
        True if the handler processed the record
    """
    try:
        if not handler.enabled(record.level):
            return False
        handler.handle(record)
        return True
    except Exception as e:
        report_failure(e)
        return False


def dispatch(
    handlers: Sequence[Any],
    record: LogRecord,
    pipeline: Optional[AsyncPipeline] = None
) -> None:
    """
    Deliver a record to every handler, in order.

    Without a pipeline each handler runs inline and the caller blocks
    until all of them return. With a pipeline one unit per handler is
    submitted and the call returns once the queue has accepted them.
    If the pipeline is closed the remaining handlers run inline.

    Args:
        handlers: Handlers in delivery order
        record: Record to deliver
        pipeline: Pipeline for asynchronous delivery, None for inline
    """
    for index, handler in enumerate(handlers):
        if pipeline is None:
            deliver(handler, record)
            continue

        try:
            pipeline.submit(handler, record)
        except QueueClosedError:
            for remaining in handlers[index:]:
                deliver(remaining, record)
            return
