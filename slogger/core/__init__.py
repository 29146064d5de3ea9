"""
Core module for slogger

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogRecord: Log record data structure
- LogLevel: Log level enumeration
- LoggerOptions: Construction options
- AsyncPipeline: Background delivery queue and worker
"""

from slogger.core.logger import Logger
from slogger.core.logger_builder import LoggerBuilder, new_async_logger, new_logger
from slogger.core.log_record import LogRecord
from slogger.core.log_level import LogLevel
from slogger.core.logger_options import LoggerOptions
from slogger.core.pipeline import AsyncPipeline

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogRecord",
    "LogLevel",
    "LoggerOptions",
    "AsyncPipeline",
    "new_logger",
    "new_async_logger",
]
