"""Exception types for the transcript client."""

from typing import Any


class TranscriptClientError(Exception):
    """Base class for every failure the client reports to the user."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ReferenceValidationError(TranscriptClientError):
    """The video reference is empty; raised before any request is made."""

    user_message = "Please enter a YouTube URL"

    def __init__(self, message: str = "reference required"):
        super().__init__(message)


class TransportError(TranscriptClientError):
    """Connection failure or non-2xx response from the extraction service."""

    def __init__(self, message: str, status_code: int | None = None):
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, details)
        self.status_code = status_code


class ServiceError(TranscriptClientError):
    """A 2xx response whose body reports that extraction failed."""


class ClipboardUnavailableError(TranscriptClientError):
    """The clipboard backend rejected the write."""


class InvalidTransitionError(RuntimeError):
    """A request state change that the state machine does not allow."""
