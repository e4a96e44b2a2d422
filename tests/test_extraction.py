"""Tests for the extraction client with httpx mocking."""

import json

import httpx
import pytest
import respx

from yt_transcript_client.errors import ServiceError, TransportError
from yt_transcript_client.extraction import ExtractionClient


@pytest.fixture
def client(service_url):
    return ExtractionClient(service_url, timeout=5.0)


class TestExtractionClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_posts_raw_reference(self, client, service_url, success_body):
        route = respx.post(service_url).mock(
            return_value=httpx.Response(200, json=success_body)
        )
        await client.extract("https://youtu.be/abc123")
        assert route.called
        sent = json.loads(route.calls.last.request.content)
        assert sent == {"youtubeUrl": "https://youtu.be/abc123"}
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_success(self, client, service_url):
        respx.post(service_url).mock(
            return_value=httpx.Response(200, json={
                "transcript": "Hello world",
                "video_id": "abc123",
                "language": "English",
                "language_code": "en",
                "is_generated": True,
            })
        )
        result = await client.extract("https://youtu.be/abc123")
        assert result.plain_text == "Hello world"
        assert result.video_id == "abc123"
        assert result.timestamped_text is None
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_structured_error_with_200(self, client, service_url):
        respx.post(service_url).mock(
            return_value=httpx.Response(200, json={"error": "Transcripts disabled for this video"})
        )
        with pytest.raises(ServiceError) as exc_info:
            await client.extract("https://youtu.be/abc123")
        assert str(exc_info.value) == "Transcripts disabled for this video"
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_error_field_wins_over_partial_data(self, client, service_url):
        respx.post(service_url).mock(
            return_value=httpx.Response(200, json={"error": "Quota exceeded", "transcript": "partial"})
        )
        with pytest.raises(ServiceError, match="Quota exceeded"):
            await client.extract("https://youtu.be/abc123")
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_non_2xx_carries_status(self, client, service_url):
        respx.post(service_url).mock(return_value=httpx.Response(500, text="oops"))
        with pytest.raises(TransportError) as exc_info:
            await client.extract("https://youtu.be/abc123")
        assert exc_info.value.status_code == 500
        assert "status: 500" in str(exc_info.value)
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_failure(self, client, service_url):
        respx.post(service_url).mock(side_effect=httpx.ConnectError("Connection refused"))
        with pytest.raises(TransportError) as exc_info:
            await client.extract("https://youtu.be/abc123")
        assert exc_info.value.status_code is None
        assert "network error" in str(exc_info.value)
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_timeout_is_transport_failure(self, client, service_url):
        respx.post(service_url).mock(side_effect=httpx.ReadTimeout("Timeout"))
        with pytest.raises(TransportError, match="ReadTimeout"):
            await client.extract("https://youtu.be/abc123")
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_non_json_body(self, client, service_url):
        respx.post(service_url).mock(return_value=httpx.Response(200, text="<html>"))
        with pytest.raises(TransportError, match="invalid response body"):
            await client.extract("https://youtu.be/abc123")
        await client.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_missing_transcript(self, client, service_url):
        respx.post(service_url).mock(
            return_value=httpx.Response(200, json={"video_id": "abc123"})
        )
        with pytest.raises(ServiceError, match="did not include a transcript"):
            await client.extract("https://youtu.be/abc123")
        await client.close()
