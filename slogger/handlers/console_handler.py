"""Console handler with ANSI colors"""

import sys
from typing import Optional

from slogger.core.log_level import LogLevel
from slogger.core.log_record import LogRecord
from slogger.formatters.base_formatter import BaseFormatter
from slogger.formatters.console_formatter import ConsoleFormatter
from slogger.handlers.base_handler import BaseHandler


class ConsoleHandler(BaseHandler):
    """Write records to a console stream."""

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        stream=None,
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize console handler.

        Args:
            level: Minimum level written
            stream: Output stream (default: sys.stdout)
            formatter: Log formatter (default: colored ConsoleFormatter
                       with timestamp and source)
        """
        super().__init__(level, formatter or ConsoleFormatter())
        self.stream = stream or sys.stdout

    def handle(self, record: LogRecord) -> None:
        """Write record to the stream."""
        msg = self.format(record)
        with self._lock:
            self.stream.write(msg + "\n")
            self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        with self._lock:
            self.stream.flush()
