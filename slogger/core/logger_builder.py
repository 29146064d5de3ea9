"""
Logger construction

new_logger() and new_async_logger() take option setters and build the
standard handler pair: a rotating JSON file handler followed by a
colored console handler. LoggerBuilder offers the same through method
chaining.

WARNING: construction deletes a regular file found at the configured
log directory path and creates a directory in its place, unless
with_replace_conflicts(False) is given.
"""

from pathlib import Path
from typing import Any, List, Optional

from slogger.core.logger import Logger
from slogger.core.logger_options import (
    LoggerOptions,
    OptionFunc,
    apply_options,
    with_console_level,
    with_dir,
    with_file,
    with_file_level,
    with_max_age,
    with_max_backups,
    with_max_size,
    with_replace_conflicts,
)
from slogger.core.log_level import LogLevel
from slogger.core.pipeline import AsyncPipeline
from slogger.core.provisioning import prepare_directory
from slogger.formatters.console_formatter import ConsoleFormatter
from slogger.formatters.json_formatter import JSONFormatter
from slogger.handlers.console_handler import ConsoleHandler
from slogger.handlers.rotating_file_handler import RotatingFileHandler


def build_handlers(options: LoggerOptions) -> List[Any]:
    """
    Provision the log directory and create the standard handlers.

    Raises:
        LoggerSetupError: If the log directory cannot be prepared
    """
    directory = prepare_directory(
        options.directory,
        replace_conflicts=options.replace_conflicting_path
    )

    file_handler = RotatingFileHandler(
        str(Path(directory) / options.filename),
        max_size=options.max_size,
        max_backups=options.max_backups,
        max_age=options.max_age,
        level=options.file_level,
        formatter=JSONFormatter(include_source=True),
    )

    console_handler = ConsoleHandler(
        level=options.console_level,
        formatter=ConsoleFormatter(
            time_format=ConsoleFormatter.DEFAULT_TIME_FORMAT,
            show_source=True,
        ),
    )

    return [file_handler, console_handler]


def create_handlers(*options: OptionFunc) -> List[Any]:
    """Apply option setters over the defaults and create the standard handlers."""
    return build_handlers(apply_options(*options))


def new_logger(*options: OptionFunc) -> Logger:
    """
    Create a synchronous logger.

    Example:
        logger = new_logger(with_dir("/var/log/app"), with_max_backups(5))
        logger.info("started", pid=123)
    """
    return Logger(create_handlers(*options), async_mode=False)


def new_async_logger(
    *options: OptionFunc,
    pipeline: Optional[AsyncPipeline] = None
) -> Logger:
    """
    Create an asynchronous logger.

    Handlers run on the pipeline's worker thread. Without an explicit
    pipeline the process-wide one is used.
    """
    return Logger(create_handlers(*options), async_mode=True, pipeline=pipeline)


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._options: List[OptionFunc] = []
        self._async = False
        self._pipeline: Optional[AsyncPipeline] = None
        self._custom_handlers: List[Any] = []

    def with_dir(self, directory: str) -> "LoggerBuilder":
        """Set log directory."""
        self._options.append(with_dir(directory))
        return self

    def with_file(self, filename: str) -> "LoggerBuilder":
        """Set log file name."""
        self._options.append(with_file(filename))
        return self

    def with_max_size(self, max_size: int) -> "LoggerBuilder":
        """Set rotation size in megabytes."""
        self._options.append(with_max_size(max_size))
        return self

    def with_max_backups(self, max_backups: int) -> "LoggerBuilder":
        """Set number of rotated files kept."""
        self._options.append(with_max_backups(max_backups))
        return self

    def with_max_age(self, max_age: int) -> "LoggerBuilder":
        """Set days rotated files are kept."""
        self._options.append(with_max_age(max_age))
        return self

    def with_file_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum level for the log file."""
        self._options.append(with_file_level(level))
        return self

    def with_console_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum level for the console."""
        self._options.append(with_console_level(level))
        return self

    def with_replace_conflicts(self, enabled: bool = True) -> "LoggerBuilder":
        """Allow or forbid replacing a file at the log directory path."""
        self._options.append(with_replace_conflicts(enabled))
        return self

    def with_async(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable async mode."""
        self._async = enabled
        return self

    def with_pipeline(self, pipeline: AsyncPipeline) -> "LoggerBuilder":
        """
        Use a dedicated pipeline instead of the process-wide one.

        Implies async mode.
        """
        self._pipeline = pipeline
        self._async = True
        return self

    def add_handler(self, handler: Any) -> "LoggerBuilder":
        """
        Add a custom handler after the standard ones.

        Args:
            handler: Object with enabled(level) and handle(record) methods

        Returns:
            Self for method chaining
        """
        self._custom_handlers.append(handler)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        handlers = create_handlers(*self._options)
        handlers.extend(self._custom_handlers)
        return Logger(handlers, async_mode=self._async, pipeline=self._pipeline)
