"""
Base formatter interface

Formatters turn a LogRecord into text. Attributes are rendered after the
record's own fields; an attribute whose key collides with one of those
fields is renamed with ATTR_PREFIX instead of replacing it.
"""

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Iterator, Tuple

from slogger.core.log_record import LogRecord

ATTR_PREFIX = "attr."


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Subclasses list the keys they write themselves in RESERVED_KEYS.
    """

    RESERVED_KEYS: FrozenSet[str] = frozenset()

    @abstractmethod
    def format(self, record: LogRecord) -> str:
        """
        Format a log record into a string.

        Args:
            record: The log record to format

        Returns:
            Formatted string representation of the log record
        """
        pass

    def attributes(self, record: LogRecord) -> Iterator[Tuple[str, Any]]:
        """
        Record attributes in call order, with reserved keys renamed.

        Example:
            # RESERVED_KEYS = {"msg"}, attrs (("msg", "user"), ("pid", 1))
            list(formatter.attributes(record))
            # [("attr.msg", "user"), ("pid", 1)]
        """
        for key, value in record.attrs:
            if key in self.RESERVED_KEYS:
                key = ATTR_PREFIX + key
            yield key, value

    def __call__(self, record: LogRecord) -> str:
        """Allow formatters to be callable."""
        return self.format(record)
