"""Terminal input package."""

from bill_manager.console.reader import (
    AMOUNT_PROMPT,
    INVALID_AMOUNT_MESSAGE,
    READ_RETRY_MESSAGE,
    InputReader,
)

__all__ = [
    "AMOUNT_PROMPT",
    "INVALID_AMOUNT_MESSAGE",
    "READ_RETRY_MESSAGE",
    "InputReader",
]
