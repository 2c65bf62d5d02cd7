# File: sitemap_scope/models.py
"""
Data models for SitemapScope.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from sitemap_scope.parser.url_filter import root_directory


class SitemapFormat(str, Enum):
    """Document formats a sitemap can be written in."""

    XML = "xml"
    RSS = "rss"
    TXT = "txt"


@dataclass(frozen=True, slots=True)
class Sitemap:
    """Location of a sitemap together with the links it vouches for.

    Instances are built by :func:`sitemap_scope.sitemap.build_sitemap` or
    :func:`sitemap_scope.sitemap.detect_sitemap`; ``links`` is computed once
    there and never changes afterwards.
    """

    location: str
    format: SitemapFormat
    links: Tuple[str, ...]
    content: str = field(default="", repr=False, compare=False)

    @property
    def root_directory(self) -> str:
        """Scope boundary: location up to and including its last ``/``."""
        return root_directory(self.location)
