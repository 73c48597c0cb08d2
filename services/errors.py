from __future__ import annotations


class CoachMatcherError(Exception):
    """Base class for errors raised by the matching and sharing pipeline."""

    status_code: int = 500
    public_message: str | None = None

    def client_message(self) -> str:
        return self.public_message or str(self) or "Failed to process request"


class InvalidRequestError(CoachMatcherError):
    """Client input that cannot be processed (empty text, empty selection, bad count)."""

    status_code = 400


class UpstreamServiceError(CoachMatcherError):
    """The text-generation service failed or returned something other than text."""


class ResponseParseError(CoachMatcherError):
    """The model completion is not a valid match result."""


class StorageError(CoachMatcherError):
    """Insert/select against the share table failed."""

    public_message = "Failed to save recommendation"


class CoachDataError(CoachMatcherError):
    """The bundled coach dataset is missing or malformed."""
