"""Shared test fixtures."""

import pytest

from yt_transcript_client.models import TranscriptResult, VideoMetadata

SERVICE_URL = "http://test-service:5000/api/transcript"


@pytest.fixture
def service_url():
    return SERVICE_URL


@pytest.fixture
def success_body():
    return {
        "transcript": "Hello world",
        "timestamped_transcript": "[0:00] Hello\n[0:02] world",
        "video_id": "abc123",
        "language": "English",
        "language_code": "en",
        "is_generated": True,
        "video_metadata": {
            "title": "A test video",
            "author_name": "Test Channel",
            "thumbnail_url": "https://i.ytimg.com/vi/abc123/hqdefault.jpg",
        },
    }


@pytest.fixture
def sample_result():
    return TranscriptResult(
        plain_text="Hello world",
        timestamped_text="[0:00] Hello\n[0:02] world",
        video_id="abc123",
        language_name="English",
        language_code="en",
        is_generated=True,
        metadata=VideoMetadata(title="A test video", author_name="Test Channel"),
    )


@pytest.fixture
def plain_only_result():
    return TranscriptResult(
        plain_text="Hello world",
        video_id="abc123",
        language_name="English",
        language_code="en",
        is_generated=True,
    )
