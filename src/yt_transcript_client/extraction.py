"""Client for the remote transcript extraction service."""

import logging

import httpx
from pydantic import ValidationError

from yt_transcript_client.errors import ServiceError, TransportError
from yt_transcript_client.models import TranscriptResult

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to fetch transcript"


class ExtractionClient:
    def __init__(self, service_url: str, timeout: float = 60.0):
        self._service_url = service_url
        self._client = httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )

    async def extract(self, reference: str) -> TranscriptResult:
        """POST the raw reference and map the outcome onto a result or an error."""
        try:
            resp = await self._client.post(
                self._service_url, json={"youtubeUrl": reference}
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"Extraction service returned HTTP {status}")
            raise TransportError(
                f"{FAILURE_PREFIX}: HTTP error! status: {status}",
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Extraction request failed: {type(e).__name__}: {e}")
            raise TransportError(
                f"{FAILURE_PREFIX}: network error ({type(e).__name__}): {e}"
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise TransportError(
                f"{FAILURE_PREFIX}: invalid response body",
                status_code=resp.status_code,
            ) from e

        if not isinstance(data, dict):
            raise TransportError(
                f"{FAILURE_PREFIX}: invalid response body",
                status_code=resp.status_code,
            )

        # A 2xx status alone does not mean the extraction worked.
        if data.get("error"):
            raise ServiceError(str(data["error"]))

        if not isinstance(data.get("transcript"), str):
            raise ServiceError(f"{FAILURE_PREFIX}: response did not include a transcript")

        try:
            result = TranscriptResult.from_service(data)
        except ValidationError as e:
            raise ServiceError(f"{FAILURE_PREFIX}: malformed response body") from e

        logger.info(
            f"Transcript received for {result.video_id or reference} "
            f"({result.language_code or 'unknown'}, timestamps={result.has_timestamps})"
        )
        return result

    async def close(self) -> None:
        await self._client.aclose()
