"""
Rotating file handler

Writes JSON lines to a file and rolls it over by size. Rotated files
are renamed with a UTC timestamp, e.g. "app-2024-05-01T12-00-00.000.log",
and pruned by count and age after each rotation.
"""

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from slogger.core.errors import RotationError
from slogger.core.log_level import LogLevel
from slogger.core.log_record import LogRecord
from slogger.formatters.base_formatter import BaseFormatter
from slogger.formatters.json_formatter import JSONFormatter
from slogger.handlers.base_handler import BaseHandler

MEGABYTE = 1024 * 1024
DEFAULT_MAX_SIZE = 100  # megabytes
BACKUP_TIME_FORMAT = "%Y-%m-%dT%H-%M-%S.%f"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RotatingFileHandler(BaseHandler):
    """
    Write records to a file with size-based rotation.

    The file is opened on the first write, appending to an existing
    file when the record still fits.
    """

    def __init__(
        self,
        filename: str,
        max_size: int = DEFAULT_MAX_SIZE,
        max_backups: int = 0,
        max_age: int = 0,
        level: LogLevel = LogLevel.WARN,
        formatter: Optional[BaseFormatter] = None,
        encoding: str = "utf-8"
    ):
        """
        Initialize rotating file handler.

        Args:
            filename: Path to log file
            max_size: Size in megabytes before rotation. Values <= 0
                      use DEFAULT_MAX_SIZE.
            max_backups: Rotated files to keep (0 keeps all)
            max_age: Days to keep rotated files (0 disables age pruning)
            level: Minimum level written (default: WARN)
            formatter: Log formatter (default: JSONFormatter with source)
            encoding: File encoding (default: 'utf-8')
        """
        super().__init__(level, formatter or JSONFormatter(include_source=True))
        self.filepath = Path(filename)
        self.max_size = max_size
        self.max_backups = max_backups
        self.max_age = max_age
        self.encoding = encoding
        self._file = None
        self._size = 0

    def _max_bytes(self) -> int:
        if self.max_size <= 0:
            return DEFAULT_MAX_SIZE * MEGABYTE
        return self.max_size * MEGABYTE

    def handle(self, record: LogRecord) -> None:
        """Write record, rotating first if it would not fit."""
        data = (self.format(record) + "\n").encode(self.encoding)
        with self._lock:
            self._write(data)

    def _write(self, data: bytes) -> None:
        """Caller must hold lock."""
        max_bytes = self._max_bytes()
        if len(data) > max_bytes:
            raise RotationError(
                f"write length {len(data)} exceeds maximum file size {max_bytes}"
            )

        if self._file is None:
            self._open_existing_or_new(len(data))

        if self._size + len(data) > max_bytes:
            self._rotate()

        self._file.write(data)
        self._file.flush()
        self._size += len(data)

    def _open_existing_or_new(self, write_len: int) -> None:
        """Append to the current file if the next write fits, else rotate."""
        try:
            size = self.filepath.stat().st_size
        except FileNotFoundError:
            self._open_new()
            return

        if size + write_len >= self._max_bytes():
            self._rotate()
            return

        self._file = open(self.filepath, "ab")
        self._size = size

    def _open_new(self) -> None:
        """Move an existing file to a backup name and start a fresh one."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        if self.filepath.exists():
            self.filepath.rename(self.backup_path(_now()))
        self._file = open(self.filepath, "wb")
        self._size = 0

    def backup_path(self, when: datetime) -> Path:
        """Backup file name for a rotation at the given time."""
        stem, ext = os.path.splitext(self.filepath.name)
        stamp = when.strftime(BACKUP_TIME_FORMAT)[:-3]
        return self.filepath.with_name(f"{stem}-{stamp}{ext}")

    def rotate(self) -> None:
        """Force a rotation, even if the current file is not full."""
        with self._lock:
            self._rotate()

    def _rotate(self) -> None:
        """Caller must hold lock."""
        self._close_file()
        self._open_new()
        self._prune_backups()

    def backups(self) -> List[Tuple[datetime, Path]]:
        """Rotated files of this log, newest first."""
        stem, ext = os.path.splitext(self.filepath.name)
        prefix = f"{stem}-"
        directory = self.filepath.parent
        if not directory.is_dir():
            return []

        found = []
        for path in directory.iterdir():
            name = path.name
            if not path.is_file() or not name.startswith(prefix) or not name.endswith(ext):
                continue
            stamp = name[len(prefix):len(name) - len(ext)] if ext else name[len(prefix):]
            try:
                when = datetime.strptime(stamp, BACKUP_TIME_FORMAT)
            except ValueError:
                continue
            found.append((when.replace(tzinfo=timezone.utc), path))

        found.sort(key=lambda item: item[0], reverse=True)
        return found

    def _prune_backups(self) -> None:
        """Remove backups beyond max_backups or older than max_age days."""
        if self.max_backups <= 0 and self.max_age <= 0:
            return

        backups = self.backups()
        remove = []
        if self.max_backups > 0:
            remove.extend(backups[self.max_backups:])
            backups = backups[:self.max_backups]
        if self.max_age > 0:
            cutoff = _now() - timedelta(days=self.max_age)
            remove.extend(item for item in backups if item[0] < cutoff)

        for _, path in remove:
            try:
                path.unlink()
            except FileNotFoundError:
                pass

    def _close_file(self) -> None:
        """Caller must hold lock."""
        if self._file:
            self._file.close()
            self._file = None

    def flush(self) -> None:
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self) -> None:
        """Close file."""
        with self._lock:
            self._close_file()
