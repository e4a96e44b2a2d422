"""Video reference validation."""

from yt_transcript_client.errors import ReferenceValidationError


def validate_reference(reference: str | None) -> str:
    """Return the reference unchanged, or raise if there is nothing to submit."""
    if reference is None or not reference.strip():
        raise ReferenceValidationError()
    return reference
