"""
Base handler interface

A handler decides whether a level is enabled and writes records. The
dispatch core only relies on enabled() and handle(); any object with
those two methods can be used as a handler.
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from slogger.core.log_level import LogLevel
from slogger.core.log_record import LogRecord
from slogger.formatters.base_formatter import BaseFormatter


class BaseHandler(ABC):
    """
    Abstract base class for log handlers.

    Thread Safety:
        Subclasses must make handle() safe to call from several threads.
        The lock below is provided for that purpose.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize handler.

        Args:
            level: Minimum level this handler accepts
            formatter: Formatter used to render records
        """
        self.level = level
        self.formatter = formatter
        self._lock = threading.Lock()

    def enabled(self, level: LogLevel) -> bool:
        """Return True if records at this level should be handled."""
        return level >= self.level

    @abstractmethod
    def handle(self, record: LogRecord) -> None:
        """
        Write a record.

        Args:
            record: Record to write

        Raises:
            Exception: Any I/O or encoding error. Callers report it.
        """
        pass

    def format(self, record: LogRecord) -> str:
        """Render a record with the formatter, or str() without one."""
        if self.formatter:
            return self.formatter.format(record)
        return str(record)

    def flush(self) -> None:
        """Flush buffered output."""

    def close(self) -> None:
        """Release resources."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level})"
