"""Selection between the plain and time-annotated transcript."""

from yt_transcript_client.models import DisplayMode, TranscriptResult


def resolve_branch(
    result: TranscriptResult | None, mode: DisplayMode
) -> tuple[str, DisplayMode]:
    """Return the text to show and the representation it actually came from.

    Asking for timestamps when the result has none falls back to the plain
    text without touching the requested mode.
    """
    if result is None:
        return "", DisplayMode.PLAIN
    if mode == DisplayMode.TIMESTAMPED and result.timestamped_text:
        return result.timestamped_text, DisplayMode.TIMESTAMPED
    return result.plain_text, DisplayMode.PLAIN


def resolve(result: TranscriptResult | None, mode: DisplayMode) -> str:
    return resolve_branch(result, mode)[0]


class DisplaySelector:
    def __init__(self, mode: DisplayMode = DisplayMode.PLAIN):
        self._mode = mode

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    def set_mode(self, mode: DisplayMode) -> None:
        self._mode = DisplayMode(mode)

    def toggle(self) -> DisplayMode:
        self._mode = (
            DisplayMode.PLAIN
            if self._mode == DisplayMode.TIMESTAMPED
            else DisplayMode.TIMESTAMPED
        )
        return self._mode
