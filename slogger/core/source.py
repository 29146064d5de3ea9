"""Caller location capture"""

import os
import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Source:
    """Source location of a log call."""

    file: str
    line: int
    function: str

    @property
    def short_file(self) -> str:
        """File name without its directory."""
        return os.path.basename(self.file)

    def __str__(self) -> str:
        return f"{self.short_file}:{self.line}"


def capture_source(skip: int = 0) -> Optional[Source]:
    """
    Capture the location of a frame above the caller.

    Args:
        skip: Number of frames to skip above the function calling
              capture_source. 0 returns the caller itself.

    Returns:
        Source of the requested frame, or None when the stack is not
        that deep or frame introspection is unavailable
    """
    try:
        frame = sys._getframe(skip + 1)
    except (ValueError, AttributeError):
        return None

    code = frame.f_code
    return Source(file=code.co_filename, line=frame.f_lineno, function=code.co_name)
