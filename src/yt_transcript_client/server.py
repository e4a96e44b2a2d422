"""YouTube Transcript client exposed as an MCP server."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated

from pydantic import Field
from mcp.server.fastmcp import FastMCP

from yt_transcript_client.config import Settings, Transport
from yt_transcript_client.export import CopyOutcome
from yt_transcript_client.models import DisplayMode, TranscriptResult
from yt_transcript_client.session import TranscriptSession
from yt_transcript_client.state import Pending, Succeeded

# Logging to stderr (MCP convention)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("yt-transcript-client")

# Module-level state
_session: TranscriptSession | None = None
_settings: Settings | None = None

# Tools that call the extraction service
TOOL_ANNOTATIONS = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "openWorldHint": True,
}

# Tools that only touch local session state
LOCAL_TOOL_ANNOTATIONS = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "openWorldHint": False,
}


@asynccontextmanager
async def app_lifespan(server: FastMCP):
    global _session, _settings
    _settings = Settings()
    _session = TranscriptSession.from_settings(_settings)
    logger.info(f"Extraction service: {_settings.service_url}")
    logger.info("Server started")
    yield

    if _session:
        await _session.close()
    logger.info("Server stopped")


mcp = FastMCP(
    "YouTube Transcript Client",
    instructions="Fetch a YouTube transcript, switch timestamps on or off, copy or download it",
    lifespan=app_lifespan,
)


def _render_header(result: TranscriptResult) -> str:
    generated = "auto-generated" if result.is_generated else "manual"
    lines = [
        f"## Transcript: {result.video_id or 'unknown'}",
        f"**Language:** {result.language_name} ({result.language_code}) | **Captions:** {generated}",
    ]
    meta = result.metadata
    if meta is not None:
        lines.append(f"**Title:** {meta.title}")
        lines.append(f"**Author:** {meta.author_name}")
        if meta.thumbnail_url:
            lines.append(f"**Thumbnail:** {meta.thumbnail_url}")
    return "\n".join(lines) + "\n"


def _render_current() -> str:
    if _session.error_message:
        return f"Error: {_session.error_message}"
    state = _session.state
    if not isinstance(state, Succeeded):
        return "No transcript loaded."
    return f"{_render_header(state.result)}\n{_session.resolved_text}"


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def get_transcript(
    url: Annotated[str, Field(description="YouTube video URL (e.g. https://youtu.be/dQw4w9WgXcQ)")],
    timestamps: Annotated[bool, Field(default=False, description="Show the time-annotated transcript when the service provides one")] = False,
) -> str:
    """Fetch the transcript of a YouTube video from the extraction service."""
    _session.set_mode(DisplayMode.TIMESTAMPED if timestamps else DisplayMode.PLAIN)
    state = await _session.submit(url)
    if isinstance(state, Pending):
        return "Request superseded by a newer submission."
    return _render_current()


@mcp.tool(annotations=LOCAL_TOOL_ANNOTATIONS)
async def set_timestamps(
    enabled: Annotated[bool, Field(description="True to show the time-annotated transcript, False for plain text")],
) -> str:
    """Switch the displayed transcript between plain and time-annotated text."""
    _session.set_mode(DisplayMode.TIMESTAMPED if enabled else DisplayMode.PLAIN)
    return _render_current()


@mcp.tool(annotations=LOCAL_TOOL_ANNOTATIONS)
async def copy_transcript() -> str:
    """Copy the displayed transcript to the clipboard."""
    outcome = await _session.copy()
    if outcome == CopyOutcome.COPIED:
        return "Copied!"
    return "Nothing copied: no transcript text is available."


@mcp.tool(annotations=LOCAL_TOOL_ANNOTATIONS)
async def download_transcript(
    directory: Annotated[str | None, Field(default=None, description="Directory to write the .txt file to (defaults to the configured download directory)")] = None,
) -> str:
    """Save the displayed transcript as a UTF-8 text file."""
    try:
        exported = _session.download(directory)
    except OSError as e:
        return f"Error writing transcript file: {e}"
    if exported is None:
        return "Nothing downloaded: no transcript text is available."
    return f"Saved {exported.filename} to {exported.path}"


@mcp.resource("transcript://current")
def current_transcript() -> str:
    """The transcript text currently selected for display."""
    return _session.resolved_text if _session else ""


def main():
    settings = Settings()
    if settings.transport == Transport.STREAMABLE_HTTP:
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
