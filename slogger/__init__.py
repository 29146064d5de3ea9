"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

slogger - A structured logging facade with synchronous and
asynchronous delivery to rotating file and console handlers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from slogger.core.errors import (
    LoggerSetupError,
    QueueClosedError,
    RotationError,
    SloggerError,
)
from slogger.core.logger import Logger
from slogger.core.logger_builder import (
    LoggerBuilder,
    create_handlers,
    new_async_logger,
    new_logger,
)
from slogger.core.logger_options import (
    LoggerOptions,
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
from slogger.core.log_record import LogRecord
from slogger.core.pipeline import (
    AsyncPipeline,
    get_default_pipeline,
    shutdown_default_pipeline,
)

# Import submodules (not all classes by default)
from slogger import formatters
from slogger import handlers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogRecord",
    "LogLevel",
    "LoggerOptions",
    "AsyncPipeline",
    "new_logger",
    "new_async_logger",
    "create_handlers",
    "get_default_pipeline",
    "shutdown_default_pipeline",
    "with_dir",
    "with_file",
    "with_max_size",
    "with_max_backups",
    "with_max_age",
    "with_file_level",
    "with_console_level",
    "with_replace_conflicts",
    "SloggerError",
    "LoggerSetupError",
    "QueueClosedError",
    "RotationError",
    "formatters",
    "handlers",
]
