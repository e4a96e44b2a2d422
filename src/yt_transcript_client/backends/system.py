"""System clipboard via pyperclip."""

import asyncio
import logging
from functools import partial

import pyperclip

from yt_transcript_client.errors import ClipboardUnavailableError
from .base import ClipboardBackend

logger = logging.getLogger(__name__)


class SystemClipboard(ClipboardBackend):
    async def write(self, text: str) -> None:
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, partial(self._copy, text))
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(f"Failed to copy text: {e}") from e

    def _copy(self, text: str) -> None:
        """Synchronous copy in executor."""
        pyperclip.copy(text)
