"""Abstract base for clipboard backends."""

from abc import ABC, abstractmethod


class ClipboardBackend(ABC):
    @abstractmethod
    async def write(self, text: str) -> None:
        """Replace the clipboard contents with text."""
        ...
