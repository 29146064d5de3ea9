"""
Logger construction options

Options are plain setters applied in caller order over a set of
defaults. Values are passed through to the handlers uninterpreted.
"""

from dataclasses import dataclass
from typing import Callable

from slogger.core.log_level import LogLevel


@dataclass
class LoggerOptions:
    """
    Logger options.

    Sizes are in megabytes and ages in days, as understood by
    RotatingFileHandler.
    """

    # File settings
    directory: str = "logs"
    filename: str = "app.log"
    max_size: int = 10
    max_backups: int = 3
    max_age: int = 7

    # Level thresholds
    file_level: LogLevel = LogLevel.WARN
    console_level: LogLevel = LogLevel.DEBUG

    # Directory provisioning
    replace_conflicting_path: bool = True

    @classmethod
    def default(cls) -> "LoggerOptions":
        """Create default options."""
        return cls()


OptionFunc = Callable[[LoggerOptions], None]


def apply_options(*options: OptionFunc) -> LoggerOptions:
    """Apply option setters, in order, over the defaults."""
    result = LoggerOptions.default()
    for option in options:
        option(result)
    return result


def with_dir(directory: str) -> OptionFunc:
    """Set the log directory."""
    def apply(options: LoggerOptions) -> None:
        options.directory = directory
    return apply


def with_file(filename: str) -> OptionFunc:
    """Set the log file name inside the log directory."""
    def apply(options: LoggerOptions) -> None:
        options.filename = filename
    return apply


def with_max_size(max_size: int) -> OptionFunc:
    """Set the size in megabytes at which the log file is rotated."""
    def apply(options: LoggerOptions) -> None:
        options.max_size = max_size
    return apply


def with_max_backups(max_backups: int) -> OptionFunc:
    """Set how many rotated files are kept."""
    def apply(options: LoggerOptions) -> None:
        options.max_backups = max_backups
    return apply


def with_max_age(max_age: int) -> OptionFunc:
    """Set how many days rotated files are kept."""
    def apply(options: LoggerOptions) -> None:
        options.max_age = max_age
    return apply


def with_file_level(level: LogLevel) -> OptionFunc:
    """Set the minimum level written to the log file."""
    def apply(options: LoggerOptions) -> None:
        options.file_level = level
    return apply


def with_console_level(level: LogLevel) -> OptionFunc:
    """Set the minimum level written to the console."""
    def apply(options: LoggerOptions) -> None:
        options.console_level = level
    return apply


def with_replace_conflicts(enabled: bool) -> OptionFunc:
    """Allow or forbid deleting a file found at the log directory path."""
    def apply(options: LoggerOptions) -> None:
        options.replace_conflicting_path = enabled
    return apply
