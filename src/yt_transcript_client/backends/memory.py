"""In-process clipboard for headless hosts."""

from .base import ClipboardBackend


class MemoryClipboard(ClipboardBackend):
    def __init__(self):
        self.contents: str | None = None
        self.writes = 0

    async def write(self, text: str) -> None:
        self.contents = text
        self.writes += 1
