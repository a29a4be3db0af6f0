"""Tests for the terminal input reader."""

import io

import pytest

from bill_manager.console import (
    AMOUNT_PROMPT,
    INVALID_AMOUNT_MESSAGE,
    READ_RETRY_MESSAGE,
    InputReader,
)
from bill_manager.models.audit import AuditEventType


class FlakyStream:
    """A stdin stand-in whose first reads fail (OSError unless `error` is set)."""

    def __init__(self, text: str, failures: int):
        self._lines = io.StringIO(text)
        self.failures = failures
        self.calls = 0
        self.error: Exception = OSError("terminal hiccup")

    def readline(self) -> str:
        self.calls += 1
        if self.failures:
            self.failures -= 1
            raise self.error
        return self._lines.readline()


def make_reader(text: str, **kwargs):
    stdout = io.StringIO()
    return InputReader(stdin=io.StringIO(text), stdout=stdout, **kwargs), stdout


class TestReadLine:
    """Tests for reading a single line."""

    def test_returns_trimmed_text(self):
        reader, _ = make_reader("  rent \n")
        assert reader.read_line() == "rent"

    def test_empty_line_is_cancel(self):
        reader, _ = make_reader("\n")
        assert reader.read_line() is None

    def test_whitespace_line_is_cancel(self):
        reader, _ = make_reader("   \t \n")
        assert reader.read_line() is None

    def test_end_of_stream_is_cancel(self):
        reader, _ = make_reader("")
        assert reader.read_line() is None

    def test_last_line_without_newline(self):
        """Test a final unterminated line is still read."""
        reader, _ = make_reader("rent")
        assert reader.read_line() == "rent"
        assert reader.read_line() is None

    def test_reads_one_line_per_call(self):
        reader, _ = make_reader("a\nb\n")
        assert reader.read_line() == "a"
        assert reader.read_line() == "b"

    def test_retries_after_read_error(self):
        """Test a failing read is retried with a message."""
        stdout = io.StringIO()
        stream = FlakyStream("rent\n", failures=2)
        reader = InputReader(stdin=stream, stdout=stdout, retry_attempts=3)

        assert reader.read_line() == "rent"
        assert stream.calls == 3
        assert stdout.getvalue().splitlines() == [READ_RETRY_MESSAGE] * 2

    def test_persistent_read_error_is_cancel(self, audit_logger, audit_storage):
        """Test exhausting the retries folds into cancel and is audited."""
        stream = FlakyStream("rent\n", failures=10)
        reader = InputReader(
            stdin=stream,
            stdout=io.StringIO(),
            retry_attempts=2,
            audit_logger=audit_logger,
        )

        assert reader.read_line() is None
        assert stream.calls == 2
        events = audit_storage.get_recent_events()
        assert events[0].event_type == AuditEventType.INPUT_READ_ERROR
        assert events[0].details["attempts"] == 2

    def test_retries_after_decode_error(self):
        """Test an undecodable line is retried like an I/O failure."""
        stdout = io.StringIO()
        stream = FlakyStream("rent\n", failures=1)
        stream.error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        reader = InputReader(stdin=stream, stdout=stdout, retry_attempts=3)

        assert reader.read_line() == "rent"
        assert stdout.getvalue().splitlines() == [READ_RETRY_MESSAGE]

    def test_invalid_utf8_from_terminal_does_not_raise(self, audit_logger):
        """Test raw bytes that are not UTF-8 never escape the reader."""
        stdout = io.StringIO()
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n1\n"), encoding="utf-8")
        reader = InputReader(stdin=stdin, stdout=stdout, audit_logger=audit_logger)

        assert reader.read_line() in (None, "1")
        assert READ_RETRY_MESSAGE in stdout.getvalue().splitlines()

    def test_persistent_decode_error_is_cancel(self, audit_logger, audit_storage):
        stream = FlakyStream("rent\n", failures=10)
        stream.error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        reader = InputReader(
            stdin=stream,
            stdout=io.StringIO(),
            retry_attempts=2,
            audit_logger=audit_logger,
        )

        assert reader.read_line() is None
        events = audit_storage.get_recent_events()
        assert events[0].event_type == AuditEventType.INPUT_READ_ERROR


class TestReadAmount:
    """Tests for reading an amount."""

    def test_parses_amount(self):
        reader, stdout = make_reader("12.5\n")
        assert reader.read_amount() == 12.5
        assert stdout.getvalue().splitlines() == [AMOUNT_PROMPT]

    def test_invalid_then_valid(self):
        """Test bad input is reported and read again without the label."""
        reader, stdout = make_reader("abc\n12.5\n")
        assert reader.read_amount() == 12.5

        lines = stdout.getvalue().splitlines()
        assert lines == [AMOUNT_PROMPT, INVALID_AMOUNT_MESSAGE]

    def test_repeated_invalid_input(self):
        reader, stdout = make_reader("abc\nnan\n7\n")
        assert reader.read_amount() == 7.0
        lines = stdout.getvalue().splitlines()
        assert lines.count(AMOUNT_PROMPT) == 1
        assert lines.count(INVALID_AMOUNT_MESSAGE) == 2

    def test_empty_is_cancel(self):
        reader, _ = make_reader("\n")
        assert reader.read_amount() is None

    def test_cancel_after_invalid_input(self):
        reader, _ = make_reader("abc\n\n")
        assert reader.read_amount() is None

    def test_end_of_stream_is_cancel(self):
        reader, _ = make_reader("abc\n")
        assert reader.read_amount() is None

    def test_negative_and_zero_accepted(self):
        reader, _ = make_reader("-40\n0\n")
        assert reader.read_amount() == -40.0
        assert reader.read_amount() == 0.0

    def test_invalid_amount_is_audited(self, audit_logger, audit_storage):
        reader, _ = make_reader("abc\n5\n", audit_logger=audit_logger)
        assert reader.read_amount() == 5.0

        events = audit_storage.get_recent_events()
        assert events[0].event_type == AuditEventType.INVALID_AMOUNT
        assert events[0].details["input"] == "abc"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
