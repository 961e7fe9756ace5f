"""Exception hierarchy for claude_messages.

Decoding failures wrap pydantic's ``ValidationError`` so callers only need
to catch one type when reading wire data.
"""

from __future__ import annotations

from typing import Any


class ClaudeMessagesError(Exception):
    """Base class for all errors raised by this package."""


class DecodeError(ClaudeMessagesError, ValueError):
    """Raised when JSON does not match the expected Messages API shape.

    Attributes:
        target: Name of the type that was being decoded.
        errors: Pydantic error dicts describing every failure.
    """

    def __init__(
        self,
        message: str,
        target: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.target = target
        self.errors = errors or []


class StreamEventMismatchError(DecodeError):
    """Raised when an SSE ``event:`` name disagrees with the payload type."""


class ContentFlatteningError(ClaudeMessagesError, ValueError):
    """Raised when content holds no block of the requested kind."""


class MessagesApiError(ClaudeMessagesError):
    """An error object returned by the Messages API, as an exception."""

    def __init__(self, error_type: str, message: str, status_code: int) -> None:
        super().__init__(f"{error_type} ({status_code}): {message}")
        self.error_type = error_type
        self.message = message
        self.status_code = status_code


__all__ = [
    "ClaudeMessagesError",
    "DecodeError",
    "StreamEventMismatchError",
    "ContentFlatteningError",
    "MessagesApiError",
]
