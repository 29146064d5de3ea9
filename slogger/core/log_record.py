"""
Log record data structure

One structured log event. Records are immutable once built and may be
shared between handlers and threads.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from slogger.core.log_level import LogLevel
from slogger.core.source import Source


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class LogRecord:
    """
    Log record data structure.

    Contains the time, severity, message, ordered attributes and caller
    location of a single log call.
    """

    level: LogLevel
    message: str
    time: datetime = field(default_factory=_now)
    attrs: Tuple[Tuple[str, Any], ...] = ()
    source: Optional[Source] = None

    def __post_init__(self):
        """Validate log record after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        if not isinstance(self.attrs, tuple):
            object.__setattr__(self, "attrs", tuple(self.attrs))

    def attr_dict(self) -> Dict[str, Any]:
        """Attributes as a dictionary, later keys winning."""
        return dict(self.attrs)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "time": self.time.isoformat(),
            "level": self.level.name,
            "message": self.message,
            "attrs": self.attr_dict(),
            "source": None if self.source is None else {
                "file": self.source.file,
                "line": self.source.line,
                "function": self.source.function,
            },
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.time.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:5}] "
            f"{self.message}"
        )
