"""Data models for transcript results."""

from enum import Enum

from pydantic import BaseModel


class RequestState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class DisplayMode(str, Enum):
    PLAIN = "plain"
    TIMESTAMPED = "timestamped"


class VideoMetadata(BaseModel):
    model_config = {"frozen": True}

    title: str = ""
    author_name: str = ""
    thumbnail_url: str | None = None


class TranscriptResult(BaseModel):
    model_config = {"frozen": True}

    plain_text: str
    timestamped_text: str | None = None
    video_id: str = ""
    language_name: str = ""
    language_code: str = ""
    is_generated: bool = False
    metadata: VideoMetadata | None = None

    @property
    def has_timestamps(self) -> bool:
        return bool(self.timestamped_text)

    @classmethod
    def from_service(cls, data: dict) -> "TranscriptResult":
        """Build a result from a successful extraction-service body."""
        raw_meta = data.get("video_metadata")
        metadata = None
        if isinstance(raw_meta, dict):
            metadata = VideoMetadata(
                title=raw_meta.get("title") or "",
                author_name=raw_meta.get("author_name") or "",
                thumbnail_url=raw_meta.get("thumbnail_url") or None,
            )
        return cls(
            plain_text=data["transcript"],
            timestamped_text=data.get("timestamped_transcript") or None,
            video_id=data.get("video_id") or "",
            language_name=data.get("language") or "",
            language_code=data.get("language_code") or "",
            is_generated=data.get("is_generated") or False,
            metadata=metadata,
        )


class ExportedFile(BaseModel):
    model_config = {"frozen": True}

    filename: str
    content: bytes
    media_type: str = "text/plain;charset=utf-8"
    path: str | None = None
