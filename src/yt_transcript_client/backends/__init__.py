"""Clipboard backends."""

from .base import ClipboardBackend
from .memory import MemoryClipboard
from .system import SystemClipboard

__all__ = ["ClipboardBackend", "MemoryClipboard", "SystemClipboard"]
