"""Single-slot user-facing error message."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Holds at most one message; presenting a new one replaces the old."""

    def __init__(self, sink: Callable[[str | None], None] | None = None):
        self._message: str | None = None
        self._sink = sink

    @property
    def message(self) -> str | None:
        return self._message

    def present(self, message: str) -> None:
        logger.warning(f"Error shown: {message}")
        self._message = message
        if self._sink:
            self._sink(message)

    def clear(self) -> None:
        if self._message is None:
            return
        self._message = None
        if self._sink:
            self._sink(None)
