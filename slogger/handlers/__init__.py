"""Handlers module - Log destinations"""

from slogger.handlers.base_handler import BaseHandler
from slogger.handlers.console_handler import ConsoleHandler
from slogger.handlers.rotating_file_handler import RotatingFileHandler

__all__ = ["BaseHandler", "ConsoleHandler", "RotatingFileHandler"]
