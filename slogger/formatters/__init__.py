"""
Log formatters module

Formatters turn a LogRecord into the text a handler writes.
"""

from slogger.formatters.base_formatter import BaseFormatter
from slogger.formatters.console_formatter import ConsoleFormatter
from slogger.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "ConsoleFormatter",
    "JSONFormatter",
]
