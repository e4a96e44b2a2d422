"""Client for a YouTube transcript extraction service."""

__version__ = "0.1.0"
