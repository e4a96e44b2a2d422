"""Transcript request session.

Owns every piece of mutable client state: the request state machine, the
display mode, the copy indicator and the current error message. Each
submission runs its extraction call as a separate task so that a newer
submission (or closing the session) can cancel it; completions that arrive
for a superseded submission are dropped.
"""

import asyncio
import logging
from pathlib import Path

from yt_transcript_client.backends import ClipboardBackend, MemoryClipboard, SystemClipboard
from yt_transcript_client.config import ClipboardKind, Settings
from yt_transcript_client.errors import (
    ClipboardUnavailableError,
    ReferenceValidationError,
    ServiceError,
    TransportError,
)
from yt_transcript_client.export import CopyOutcome, Exporter
from yt_transcript_client.extraction import ExtractionClient
from yt_transcript_client.models import (
    DisplayMode,
    ExportedFile,
    RequestState,
    TranscriptResult,
)
from yt_transcript_client.reporter import ErrorReporter
from yt_transcript_client.state import (
    Failed,
    Idle,
    Pending,
    RequestStateMachine,
    State,
    Succeeded,
)
from yt_transcript_client.validation import validate_reference
from yt_transcript_client.view import DisplaySelector, resolve

logger = logging.getLogger(__name__)


class TranscriptSession:
    def __init__(
        self,
        client: ExtractionClient,
        clipboard: ClipboardBackend,
        copy_feedback_seconds: float = 2.0,
        download_dir: str | Path = ".",
        reporter: ErrorReporter | None = None,
    ):
        self._client = client
        self._machine = RequestStateMachine()
        self._selector = DisplaySelector()
        self._exporter = Exporter(
            clipboard,
            feedback_seconds=copy_feedback_seconds,
            download_dir=download_dir,
        )
        self._reporter = reporter or ErrorReporter()
        self._inflight: asyncio.Task | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranscriptSession":
        if settings.clipboard == ClipboardKind.MEMORY:
            clipboard: ClipboardBackend = MemoryClipboard()
        else:
            clipboard = SystemClipboard()
        return cls(
            client=ExtractionClient(
                settings.service_url, timeout=settings.request_timeout
            ),
            clipboard=clipboard,
            copy_feedback_seconds=settings.copy_feedback_seconds,
            download_dir=settings.download_dir,
        )

    # -- read-only views --

    @property
    def state(self) -> State:
        return self._machine.state

    @property
    def status(self) -> RequestState:
        return self._machine.status

    @property
    def is_loading(self) -> bool:
        return self.status == RequestState.PENDING

    @property
    def result(self) -> TranscriptResult | None:
        state = self._machine.state
        if isinstance(state, Succeeded):
            return state.result
        return None

    @property
    def error_message(self) -> str | None:
        return self._reporter.message

    @property
    def display_mode(self) -> DisplayMode:
        return self._selector.mode

    @property
    def resolved_text(self) -> str:
        return resolve(self.result, self.display_mode)

    @property
    def copied(self) -> bool:
        return self._exporter.feedback.active

    def can_submit(self, reference: str | None) -> bool:
        return not self.is_loading and bool((reference or "").strip())

    # -- operations --

    async def submit(self, reference: str | None) -> State:
        """Run one extraction attempt and return the state it ended in."""
        try:
            reference = validate_reference(reference)
        except ReferenceValidationError as e:
            logger.info(f"Submission rejected: {e}")
            self._reporter.present(e.user_message)
            return self.state

        previous = self._inflight
        if previous is not None and not previous.done():
            logger.info("Cancelling superseded submission")
            previous.cancel()

        self._machine.transition(Pending(reference=reference))
        self._reporter.clear()
        self._exporter.feedback.reset()

        task = asyncio.create_task(self._client.extract(reference))
        self._inflight = task
        try:
            result = await task
        except asyncio.CancelledError:
            if self._inflight is task:
                self._inflight = None
                self._machine.transition(Idle())
                logger.info(f"Submission for {reference} was cancelled")
                raise
            logger.info(f"Submission for {reference} was superseded")
            return self.state
        except TransportError as e:
            outcome: State = Failed(message=str(e), kind="transport")
        except ServiceError as e:
            outcome = Failed(message=str(e), kind="service")
        else:
            outcome = Succeeded(result=result)

        if self._inflight is not task:
            logger.info(f"Discarding late response for {reference}")
            return self.state

        self._inflight = None
        self._machine.transition(outcome)
        if isinstance(outcome, Failed):
            self._reporter.present(outcome.message)
        return outcome

    def set_mode(self, mode: DisplayMode) -> str:
        self._selector.set_mode(mode)
        return self.resolved_text

    def toggle_timestamps(self) -> DisplayMode:
        return self._selector.toggle()

    async def copy(self) -> CopyOutcome:
        try:
            return await self._exporter.copy(self.result, self.display_mode)
        except ClipboardUnavailableError as e:
            logger.warning(f"Copy failed: {e}")
            return CopyOutcome.NOOP

    def download(self, directory: str | Path | None = None) -> ExportedFile | None:
        return self._exporter.download(self.result, self.display_mode, directory)

    async def close(self) -> None:
        task, self._inflight = self._inflight, None
        if task is not None and not task.done():
            task.cancel()
        if self.status == RequestState.PENDING:
            self._machine.transition(Idle())
        self._exporter.feedback.reset()
        await self._client.close()
