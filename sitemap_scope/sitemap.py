# File: sitemap_scope/sitemap.py
"""sitemap_scope.sitemap: Building sitemaps for a known format or detecting the format.

Detection tries every configured format on the same content, drops the ones
whose parser rejects it, and keeps the candidate with the most validated
links. On equal counts the format listed first in
:attr:`SitemapConfig.detection_order` wins (XML, then RSS, then TXT by
default), so a given input always yields the same result.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Union

from sitemap_scope.config import SitemapConfig
from sitemap_scope.errors import (
    InvalidLocationError,
    MalformedDocumentError,
    UndetectableFormatError,
)
from sitemap_scope.logger import logger
from sitemap_scope.models import Sitemap, SitemapFormat
from sitemap_scope.parser.extractors import parse_links
from sitemap_scope.parser.url_filter import filter_links, parse_url

__all__ = ["build_sitemap", "detect_sitemap"]

_FormatT = Union[SitemapFormat, str]


def _parse_location(location: str, config: SitemapConfig) -> str:
    url = parse_url(location, config.allowed_schemes)
    if url is None:
        raise InvalidLocationError(location)
    return url


def _build(location: str, content: str, fmt: SitemapFormat, config: SitemapConfig) -> Sitemap:
    raw_links = parse_links(fmt, content)
    links = filter_links(location, raw_links, config.allowed_schemes)
    return Sitemap(location=location, format=fmt, links=links, content=content)


def build_sitemap(
    location: str,
    content: str,
    fmt: _FormatT,
    *,
    config: Optional[SitemapConfig] = None,
) -> Sitemap:
    """Build a sitemap from *content* written in a known format.

    Args:
        location: URL the content was retrieved from.
        content: raw document text.
        fmt: format of *content* (enum member or its value, e.g. ``"rss"``).
        config: optional settings; defaults are used when omitted.

    Raises:
        InvalidLocationError: *location* is not a well-formed URL.
        MalformedDocumentError: *content* cannot be parsed as *fmt*.
    """
    cfg = config or SitemapConfig()
    return _build(_parse_location(location, cfg), content, SitemapFormat(fmt), cfg)


def detect_sitemap(
    location: str,
    content: str,
    *,
    config: Optional[SitemapConfig] = None,
) -> Sitemap:
    """Build a sitemap from *content* whose format is not known in advance.

    Raises:
        InvalidLocationError: *location* is not a well-formed URL.
        UndetectableFormatError: every configured format rejected *content*.
    """
    cfg = config or SitemapConfig()
    url = _parse_location(location, cfg)

    candidates: List[Sitemap] = []
    failures: Dict[SitemapFormat, MalformedDocumentError] = {}
    for fmt in cfg.detection_order:
        try:
            candidate = _build(url, content, fmt, cfg)
        except MalformedDocumentError as exc:
            logger.debug("Format %s rejected for %s: %s", fmt.value, url, exc.reason)
            failures[fmt] = exc
            continue
        logger.debug("Format %s gives %d links for %s", fmt.value, len(candidate.links), url)
        candidates.append(candidate)

    if not candidates:
        raise UndetectableFormatError(failures)

    # max() keeps the first of equal elements, which gives the order-based tie-break
    best = max(candidates, key=lambda sitemap: len(sitemap.links))
    logger.debug("Detected %s sitemap at %s", best.format.value, url)
    return best
