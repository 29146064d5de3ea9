"""
Console formatter

Produces single-line, optionally colored output:
"2024-05-01 12:00:00 INF app.py:12 started pid=123"
"""

from slogger.core.log_record import LogRecord
from slogger.formatters.base_formatter import BaseFormatter

DIM = "\033[2m"
RESET = "\033[0m"


class ConsoleFormatter(BaseFormatter):
    """Format log records for a terminal."""

    DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(
        self,
        time_format: str = DEFAULT_TIME_FORMAT,
        show_source: bool = True,
        colored: bool = True
    ):
        """
        Initialize console formatter.

        Args:
            time_format: strftime format for the timestamp
            show_source: Include file:line of the call site
            colored: Use ANSI color codes
        """
        self.time_format = time_format
        self.show_source = show_source
        self.colored = colored

    def format(self, record: LogRecord) -> str:
        """
        Format log record for the console.

        Args:
            record: Log record to format

        Returns:
            Formatted string
        """
        parts = []

        timestamp = record.time.strftime(self.time_format)
        level = record.level.short_name
        if self.colored:
            timestamp = f"{DIM}{timestamp}{RESET}"
            level = f"{record.level.color_code}{level}{record.level.reset_code}"
        parts.append(timestamp)
        parts.append(level)

        if self.show_source and record.source is not None:
            source = str(record.source)
            parts.append(f"{DIM}{source}{RESET}" if self.colored else source)

        parts.append(record.message)

        for key, value in self.attributes(record):
            if self.colored:
                parts.append(f"{DIM}{key}={RESET}{value}")
            else:
                parts.append(f"{key}={value}")

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"ConsoleFormatter(time_format='{self.time_format}', "
            f"source={self.show_source}, colored={self.colored})"
        )
