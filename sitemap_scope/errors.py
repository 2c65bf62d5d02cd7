# File: sitemap_scope/errors.py
"""sitemap_scope.errors: Exceptions raised while building a sitemap.

Only whole-document problems are exceptions. A single malformed or
out-of-scope link is dropped by :mod:`sitemap_scope.parser.url_filter`
and never surfaces here.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from sitemap_scope.models import SitemapFormat

__all__ = [
    "SitemapError",
    "InvalidLocationError",
    "MalformedDocumentError",
    "UndetectableFormatError",
]


class SitemapError(ValueError):
    """Base class for every error of the package."""


class InvalidLocationError(SitemapError):
    """The location a sitemap was retrieved from is not a well-formed URL."""

    def __init__(self, location: str) -> None:
        super().__init__(f"Invalid sitemap location: {location!r}")
        self.location = location


class MalformedDocumentError(SitemapError):
    """Content cannot be parsed under the assumed format."""

    def __init__(self, fmt: SitemapFormat, reason: str) -> None:
        super().__init__(f"Content is not a valid {fmt.value} sitemap: {reason}")
        self.format = fmt
        self.reason = reason


class UndetectableFormatError(SitemapError):
    """Every attempted format rejected the content."""

    def __init__(self, failures: Dict[SitemapFormat, MalformedDocumentError]) -> None:
        tried = ", ".join(fmt.value for fmt in failures) or "none"
        super().__init__(f"Unable to detect sitemap format (tried: {tried})")
        self.failures = failures
