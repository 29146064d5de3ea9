"""Tests for handlers and formatters"""

import io
import json
from datetime import datetime, timedelta, timezone

import pytest

from slogger import LogLevel, LogRecord, RotationError
from slogger.core.source import Source
from slogger.formatters import BaseFormatter, ConsoleFormatter, JSONFormatter
from slogger.handlers import ConsoleHandler, RotatingFileHandler
from slogger.handlers import rotating_file_handler


class PlainFormatter(BaseFormatter):
    """Formatter returning the bare message."""

    def format(self, record):
        return record.message


def make_record(level=LogLevel.WARN, message="Test", attrs=(), source=None):
    return LogRecord(
        level=level,
        message=message,
        time=datetime(2024, 5, 1, 12, 0, 0),
        attrs=attrs,
        source=source,
    )


@pytest.fixture
def small_megabyte(monkeypatch):
    """Make max_size count bytes instead of megabytes."""
    monkeypatch.setattr(rotating_file_handler, "MEGABYTE", 1)


class TestJSONFormatter:
    """Test JSON output."""

    def test_key_order(self):
        record = make_record(
            attrs=(("pid", 123), ("user", "root")),
            source=Source("/srv/app.py", 12, "main"),
        )
        data = json.loads(JSONFormatter().format(record))

        assert list(data) == ["time", "level", "source", "msg", "pid", "user"]
        assert data["level"] == "WARN"
        assert data["msg"] == "Test"
        assert data["source"] == {"function": "main", "file": "/srv/app.py", "line": 12}

    def test_without_source(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert "source" not in data

    def test_source_disabled(self):
        record = make_record(source=Source("/srv/app.py", 12, "main"))
        data = json.loads(JSONFormatter(include_source=False).format(record))
        assert "source" not in data

    def test_colliding_attributes_are_renamed(self):
        record = make_record(
            message="disk low",
            attrs=(("msg", "user"), ("time", "t"), ("level", "x"), ("source", "s"), ("pid", 1)),
            source=Source("/srv/app.py", 12, "main"),
        )
        data = json.loads(JSONFormatter().format(record))

        assert data["msg"] == "disk low"
        assert data["level"] == "WARN"
        assert data["time"] == "2024-05-01T12:00:00"
        assert data["source"]["line"] == 12
        assert data["attr.msg"] == "user"
        assert data["attr.time"] == "t"
        assert data["attr.level"] == "x"
        assert data["attr.source"] == "s"
        assert data["pid"] == 1

    def test_unencodable_value_uses_str(self):
        record = make_record(attrs=(("when", datetime(2024, 1, 2)),))
        data = json.loads(JSONFormatter().format(record))
        assert data["when"] == "2024-01-02 00:00:00"


class TestConsoleFormatter:
    """Test console output."""

    def test_attributes_not_renamed(self):
        formatter = ConsoleFormatter(colored=False, show_source=False)
        record = make_record(attrs=(("msg", "user"),))
        assert formatter.format(record) == "2024-05-01 12:00:00 WRN Test msg=user"

    def test_plain_format(self):
        record = make_record(
            level=LogLevel.INFO,
            message="started",
            attrs=(("pid", 123),),
            source=Source("/srv/app.py", 12, "main"),
        )
        formatter = ConsoleFormatter(colored=False)

        assert formatter.format(record) == "2024-05-01 12:00:00 INF app.py:12 started pid=123"

    def test_without_source(self):
        formatter = ConsoleFormatter(colored=False, show_source=False)
        record = make_record(source=Source("/srv/app.py", 12, "main"))
        assert formatter.format(record) == "2024-05-01 12:00:00 WRN Test"

    def test_colored(self):
        formatter = ConsoleFormatter()
        output = formatter.format(make_record(level=LogLevel.ERROR))
        assert LogLevel.ERROR.color_code + "ERR" in output
        assert output.endswith("Test")


class TestConsoleHandler:
    """Test console handler."""

    def test_writes_line(self):
        stream = io.StringIO()
        handler = ConsoleHandler(stream=stream, formatter=PlainFormatter())

        handler.handle(make_record(message="hello"))

        assert stream.getvalue() == "hello\n"

    def test_default_threshold_is_debug(self):
        handler = ConsoleHandler(stream=io.StringIO())
        assert all(handler.enabled(level) for level in LogLevel)

    def test_threshold(self):
        handler = ConsoleHandler(level=LogLevel.ERROR, stream=io.StringIO())
        assert not handler.enabled(LogLevel.WARN)
        assert handler.enabled(LogLevel.ERROR)


class TestRotatingFileHandler:
    """Test rotating file handler."""

    def test_opens_lazily(self, tmp_path):
        path = tmp_path / "app.log"
        handler = RotatingFileHandler(str(path))
        assert not path.exists()

        handler.handle(make_record())
        handler.close()

        assert path.exists()

    def test_default_threshold_is_warn(self, tmp_path):
        handler = RotatingFileHandler(str(tmp_path / "app.log"))
        assert not handler.enabled(LogLevel.INFO)
        assert handler.enabled(LogLevel.WARN)

    def test_appends_to_existing_file(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("old\n", encoding="utf-8")

        handler = RotatingFileHandler(str(path), formatter=PlainFormatter())
        handler.handle(make_record(message="new"))
        handler.close()

        assert path.read_text(encoding="utf-8") == "old\nnew\n"
        assert handler.backups() == []

    def test_rotates_when_full(self, tmp_path, small_megabyte):
        path = tmp_path / "app.log"
        handler = RotatingFileHandler(str(path), max_size=12, formatter=PlainFormatter())

        for message in ("aaaa", "bbbb", "cccc"):
            handler.handle(make_record(message=message))
        handler.close()

        assert path.read_text(encoding="utf-8") == "cccc\n"
        backups = handler.backups()
        assert len(backups) == 1
        assert backups[0][1].read_text(encoding="utf-8") == "aaaa\nbbbb\n"

    def test_rotates_existing_file_that_does_not_fit(self, tmp_path, small_megabyte):
        path = tmp_path / "app.log"
        path.write_text("0123456789\n", encoding="utf-8")

        handler = RotatingFileHandler(str(path), max_size=12, formatter=PlainFormatter())
        handler.handle(make_record(message="new"))
        handler.close()

        assert path.read_text(encoding="utf-8") == "new\n"
        assert len(handler.backups()) == 1

    def test_oversized_write(self, tmp_path, small_megabyte):
        handler = RotatingFileHandler(
            str(tmp_path / "app.log"),
            max_size=3,
            formatter=PlainFormatter(),
        )
        with pytest.raises(RotationError):
            handler.handle(make_record(message="too long"))

    def test_non_positive_size_uses_default(self, tmp_path):
        handler = RotatingFileHandler(str(tmp_path / "app.log"), max_size=0)
        assert handler._max_bytes() == rotating_file_handler.DEFAULT_MAX_SIZE * rotating_file_handler.MEGABYTE

        handler = RotatingFileHandler(str(tmp_path / "app.log"), max_size=-1)
        assert handler._max_bytes() == rotating_file_handler.DEFAULT_MAX_SIZE * rotating_file_handler.MEGABYTE

    def test_backup_name(self, tmp_path):
        handler = RotatingFileHandler(str(tmp_path / "app.log"))
        when = datetime(2024, 5, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        assert handler.backup_path(when).name == "app-2024-05-01T12-00-00.123.log"

    def test_max_backups(self, tmp_path, monkeypatch):
        start = datetime(2024, 5, 1, tzinfo=timezone.utc)
        ticks = iter(range(100))
        monkeypatch.setattr(
            rotating_file_handler, "_now", lambda: start + timedelta(seconds=next(ticks))
        )

        handler = RotatingFileHandler(str(tmp_path / "app.log"), max_backups=2)
        handler.handle(make_record())
        for _ in range(4):
            handler.rotate()
        handler.close()

        names = [path.name for _, path in handler.backups()]
        assert len(names) == 2
        assert names[0] > names[1]
        assert names[-1] > "app-2024-05-01T00-00-01"

    def test_max_age(self, tmp_path):
        stale = tmp_path / "app-2000-01-01T00-00-00.000.log"
        stale.write_text("stale\n", encoding="utf-8")
        unrelated = tmp_path / "other-2000-01-01T00-00-00.000.log"
        unrelated.write_text("keep\n", encoding="utf-8")

        handler = RotatingFileHandler(str(tmp_path / "app.log"), max_age=7)
        handler.handle(make_record())
        handler.rotate()
        handler.close()

        assert not stale.exists()
        assert unrelated.exists()
        assert len(handler.backups()) == 1

    def test_no_limits_keep_everything(self, tmp_path):
        stale = tmp_path / "app-2000-01-01T00-00-00.000.log"
        stale.write_text("stale\n", encoding="utf-8")

        handler = RotatingFileHandler(str(tmp_path / "app.log"))
        handler.handle(make_record())
        handler.rotate()
        handler.close()

        assert stale.exists()
        assert len(handler.backups()) == 2
