from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlparse, urlunparse

from .errors import ValidationError

ALLOWED_SCHEMES = {"http", "https"}
_WHITESPACE = re.compile(r"\s+")


def validate_url(url: Any) -> str:
    """Return ``url`` stripped, or raise :class:`ValidationError` if it is not absolute http(s)."""
    if url is None or not isinstance(url, str):
        raise ValidationError("No URL provided")
    cleaned = url.strip()
    if not cleaned:
        raise ValidationError("No URL provided")
    if any(ch.isspace() for ch in cleaned):
        raise ValidationError(f"Malformed URL: {url!r}")

    try:
        parsed = urlparse(cleaned)
        # Accessing .port validates it.
        parsed.port
    except ValueError as exc:
        raise ValidationError(f"Malformed URL: {url!r}") from exc

    scheme = (parsed.scheme or "").lower()
    if scheme not in ALLOWED_SCHEMES:
        raise ValidationError(f"URL must be absolute http(s): {url!r}")
    if not parsed.hostname:
        raise ValidationError(f"Cannot determine host for URL: {url!r}")

    return urlunparse((scheme, parsed.netloc, parsed.path or "/", parsed.params, parsed.query, parsed.fragment))


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def preview(text: str, limit: int = 200, marker: str = "...") -> str:
    return text[:limit] + marker
