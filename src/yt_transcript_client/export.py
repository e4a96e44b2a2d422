"""Clipboard copy and file download of the displayed transcript."""

import asyncio
import logging
import re
from enum import Enum
from pathlib import Path

from yt_transcript_client.backends import ClipboardBackend
from yt_transcript_client.models import DisplayMode, ExportedFile, TranscriptResult
from yt_transcript_client.view import resolve_branch

logger = logging.getLogger(__name__)

MEDIA_TYPE = "text/plain;charset=utf-8"


class CopyOutcome(str, Enum):
    COPIED = "copied"
    NOOP = "noop"


def download_filename(video_id: str | None, timestamped: bool) -> str:
    # Ids come from the service; keep them to a single safe path component.
    safe_id = re.sub(r"[^\w.-]", "_", video_id or "").strip(".")
    suffix = "with-timestamps" if timestamped else "plain"
    return f"youtube-transcript-{safe_id or 'transcript'}-{suffix}.txt"


class CopyFeedback:
    """Transient "copied" flag that reverts on its own after a delay.

    Only one revert is ever scheduled; showing the flag again cancels the
    outstanding revert and starts a fresh window.
    """

    def __init__(self, delay: float = 2.0):
        self._delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self.active = False

    def show(self) -> None:
        self.cancel()
        self.active = True
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._revert)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def reset(self) -> None:
        self.cancel()
        self.active = False

    def _revert(self) -> None:
        self._handle = None
        self.active = False


class Exporter:
    def __init__(
        self,
        clipboard: ClipboardBackend,
        feedback_seconds: float = 2.0,
        download_dir: str | Path = ".",
    ):
        self._clipboard = clipboard
        self._download_dir = Path(download_dir)
        self.feedback = CopyFeedback(feedback_seconds)

    async def copy(
        self, result: TranscriptResult | None, mode: DisplayMode
    ) -> CopyOutcome:
        text, _ = resolve_branch(result, mode)
        if not text:
            return CopyOutcome.NOOP
        await self._clipboard.write(text)
        self.feedback.show()
        logger.info(f"Copied {len(text)} characters to clipboard")
        return CopyOutcome.COPIED

    def build_file(
        self, result: TranscriptResult | None, mode: DisplayMode
    ) -> ExportedFile | None:
        text, branch = resolve_branch(result, mode)
        if not text:
            return None
        return ExportedFile(
            filename=download_filename(
                result.video_id, branch == DisplayMode.TIMESTAMPED
            ),
            content=text.encode("utf-8"),
            media_type=MEDIA_TYPE,
        )

    def download(
        self,
        result: TranscriptResult | None,
        mode: DisplayMode,
        directory: str | Path | None = None,
    ) -> ExportedFile | None:
        exported = self.build_file(result, mode)
        if exported is None:
            return None
        target_dir = Path(directory) if directory is not None else self._download_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / exported.filename
        path.write_bytes(exported.content)
        logger.info(f"Transcript written to {path}")
        return exported.model_copy(update={"path": str(path)})
