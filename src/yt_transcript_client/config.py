"""Configuration via environment variables."""

from enum import Enum
from pydantic_settings import BaseSettings


class ClipboardKind(str, Enum):
    SYSTEM = "system"
    MEMORY = "memory"


class Transport(str, Enum):
    STDIO = "stdio"
    STREAMABLE_HTTP = "streamable-http"


class Settings(BaseSettings):
    model_config = {"env_prefix": "YT_TRANSCRIPT_"}

    service_url: str = "http://127.0.0.1:5000/api/transcript"
    request_timeout: float = 60.0
    copy_feedback_seconds: float = 2.0
    clipboard: ClipboardKind = ClipboardKind.SYSTEM
    download_dir: str = "."
    transport: Transport = Transport.STDIO
