"""
Terminal Input Reader

DESIGN DECISION: An empty line means "cancel". Every prompt in the menu uses
the same convention, so the reader folds three situations into one signal
(None):
1. The user pressed enter on an empty (or whitespace-only) line
2. The input stream ended
3. The stream kept failing (I/O errors or undecodable bytes) after the
   configured number of attempts

A blank line is therefore indistinguishable from a deliberate cancel.
Callers only ever see a non-empty, stripped string or None.
"""

import sys
from typing import Optional, TextIO

import structlog
from pydantic import ValidationError
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
)

from bill_manager.audit import AuditLogger
from bill_manager.models.bill import parse_amount


AMOUNT_PROMPT = "Amount : "
INVALID_AMOUNT_MESSAGE = "Please enter a valid number "
READ_RETRY_MESSAGE = "Please enter your data again "

# Failures of the stream itself, and bytes the stream cannot decode
READ_ERRORS = (OSError, UnicodeDecodeError)


class InputReader:
    """
    Reads trimmed lines and amounts from a text stream.

    Blocks on the underlying stream; there are no timeouts.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        retry_attempts: int = 3,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._retry_attempts = retry_attempts
        self._audit_logger = audit_logger
        self._logger = structlog.get_logger(__name__)

    def write(self, message: str = "") -> None:
        """Print one line to the terminal."""
        print(message, file=self._stdout, flush=True)

    def _announce_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        self._logger.warning(
            "input_read_retry",
            attempt=retry_state.attempt_number,
            error=str(error),
        )
        self.write(READ_RETRY_MESSAGE)

    def _read_raw_line(self) -> str:
        retrying = Retrying(
            stop=stop_after_attempt(self._retry_attempts),
            retry=retry_if_exception_type(READ_ERRORS),
            before_sleep=self._announce_retry,
            reraise=True,
        )
        return retrying(self._stdin.readline)

    def read_line(self) -> Optional[str]:
        """
        Read one line and strip it.

        Returns:
            The stripped text, or None for cancel (empty line,
            end of stream, or a read that kept failing)
        """
        try:
            raw = self._read_raw_line()
        except READ_ERRORS as e:
            self._logger.error(
                "input_read_failed",
                attempts=self._retry_attempts,
                error=str(e),
            )
            if self._audit_logger:
                self._audit_logger.log_input_read_error(str(e), self._retry_attempts)
            return None

        text = raw.strip()
        if not text:
            return None
        return text

    def read_amount(self) -> Optional[float]:
        """
        Read a bill amount.

        Shows the amount label once. Unparseable input is reported and
        read again without repeating the label.

        Returns:
            The parsed amount, or None if the user cancelled
        """
        self.write(AMOUNT_PROMPT)
        while True:
            text = self.read_line()
            if text is None:
                return None

            try:
                return parse_amount(text)
            except ValidationError as e:
                self._logger.debug("invalid_amount", input=text)
                if self._audit_logger:
                    self._audit_logger.log_invalid_amount(
                        text,
                        "; ".join(err["msg"] for err in e.errors()),
                    )
                self.write(INVALID_AMOUNT_MESSAGE)
