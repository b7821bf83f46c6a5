"""Exceptions raised by the resume builder services."""

from __future__ import annotations


class PreviewNotRenderedError(Exception):
    """Raised when a PDF export is requested before the preview is mounted."""


class ExportInProgressError(Exception):
    """Raised when a PDF export is requested while another one is running."""


class ExportFailedError(Exception):
    """Raised when the capture or assembly stage of a PDF export fails."""


class GatewayError(Exception):
    """Raised when the persistence backend cannot be reached or errors out.

    Attributes:
        status_code: HTTP status returned by the backend, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthorizationError(GatewayError):
    """Raised when the bearer credential is missing, invalid or expired."""


class SaveUnavailableError(Exception):
    """Raised when saving is requested from a demo or anonymous session."""
