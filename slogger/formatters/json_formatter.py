"""
JSON formatter for structured logging

Formats log records as one JSON object per line
"""

import json
from slogger.core.log_record import LogRecord
from slogger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log records as JSON objects.

    Keys are written in the order time, level, source, msg, followed by
    the record attributes in the order they were given. An attribute
    named like one of those keys is written as "attr.<key>".
    """

    RESERVED_KEYS = frozenset({"time", "level", "source", "msg"})

    def __init__(
        self,
        include_source: bool = True,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_source: Include a "source" object (function, file, line)
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            formatter = JSONFormatter()
            formatter.format(record)
            # {"time": "...", "level": "WARN", "source": {...}, "msg": "disk low", "free": 12}
        """
        self.include_source = include_source
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, record: LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_dict = {
            "time": record.time.isoformat(),
            "level": record.level.name,
        }

        if self.include_source and record.source is not None:
            log_dict["source"] = {
                "function": record.source.function,
                "file": record.source.file,
                "line": record.source.line,
            }

        log_dict["msg"] = record.message

        for key, value in self.attributes(record):
            log_dict[key] = value

        # Values json cannot encode are written as their str()
        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(source={self.include_source}, indent={self.indent})"
