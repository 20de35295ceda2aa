from __future__ import annotations

from typing import Optional


class AnalysisError(Exception):
    """Base class for errors raised while analyzing a page."""


class ValidationError(AnalysisError, ValueError):
    """The caller supplied a missing or malformed URL."""


class FetchError(AnalysisError):
    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(AnalysisError):
    """Extraction failure. Kept internal: the extractor degrades instead of raising it."""
