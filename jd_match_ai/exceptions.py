"""Errors raised while validating uploads and talking to the analysis service."""

from typing import Optional


class AnalysisError(Exception):
    """Base class for all upload / analysis failures surfaced to the user."""


class FileValidationError(AnalysisError):
    """Selected file has an unsupported media type or exceeds the size limit."""

    def __init__(self, message: str, slot: Optional[str] = None, filename: Optional[str] = None):
        super().__init__(message)
        self.slot = slot
        self.filename = filename


class TransportError(AnalysisError):
    """Network or connectivity failure while submitting files."""


class MalformedResponseError(TransportError):
    """Analysis service answered with a body that is not a JSON object."""


class ServiceError(AnalysisError):
    """Analysis service returned a non-success HTTP status."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code
