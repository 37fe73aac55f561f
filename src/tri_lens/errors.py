"""Error types for report extraction."""

from __future__ import annotations


class ExtractionError(ValueError):
    """Raised when a structured report cannot be recovered from model output."""


class NoJsonFound(ExtractionError):
    pass


class UnbalancedBraces(ExtractionError):
    pass


class JsonSyntaxInvalid(ExtractionError):
    pass


class InvalidReportFormat(Exception):
    """User-facing failure; the detailed cause is logged and chained."""

    def __init__(self, message: str = "Invalid intelligence report format.") -> None:
        super().__init__(message)
