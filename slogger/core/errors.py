"""Exceptions raised by slogger"""


class SloggerError(Exception):
    """Base class for slogger errors."""


class LoggerSetupError(SloggerError):
    """Raised when a logger cannot prepare its destination."""


class QueueClosedError(SloggerError):
    """Raised when using a delivery queue that has been closed."""


class RotationError(SloggerError):
    """Raised when a record cannot be written to a rotating file."""
