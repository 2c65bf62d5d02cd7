# File: sitemap_scope/parser/url_filter.py
"""sitemap_scope.parser.url_filter: URL parsing and scoping of raw sitemap links.

A sitemap may only vouch for URLs that live at or below its own directory.
The check is a literal string-prefix test against :func:`root_directory`,
not a path-segment comparison: with root ``http://x.com/a/`` the link
``http://x.com/ab`` is rejected while ``http://x.com/a/../b`` is kept.
"""
from __future__ import annotations

from typing import Collection, Iterable, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from sitemap_scope.logger import logger

__all__: Sequence[str] = (
    "DEFAULT_SCHEMES",
    "root_directory",
    "parse_url",
    "filter_links",
)

DEFAULT_SCHEMES: Tuple[str, ...] = ("http", "https", "ftp", "file")

# schemes whose URLs are meaningful without a host part
_HOSTLESS_SCHEMES = frozenset({"file"})

# trimmed from both ends of a raw link: controls and the space character
_TRIMMED = "".join(chr(code) for code in range(0x21))


def root_directory(location: str) -> str:
    """Return *location* truncated after its final ``/`` (the ``/`` is kept).

    ``http://example.com/sitemaps/a.xml`` → ``http://example.com/sitemaps/``.
    """
    return location[: location.rfind("/") + 1]


def parse_url(raw: str, allowed_schemes: Collection[str] = DEFAULT_SCHEMES) -> Optional[str]:
    """Parse *raw* as an absolute URL and return its string form.

    Leading and trailing spaces and control characters are ignored and the
    scheme is lower-cased. The rest of the string, inner spaces included, is
    returned verbatim. ``None`` means *raw* is not a URL.
    """
    candidate = raw.strip(_TRIMMED)
    if not candidate:
        return None
    try:
        parts = urlsplit(candidate)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if scheme not in allowed_schemes:
        return None
    if not parts.netloc and scheme not in _HOSTLESS_SCHEMES:
        return None
    return scheme + candidate[len(parts.scheme):]


def filter_links(
    location: str,
    raw_links: Iterable[str],
    allowed_schemes: Collection[str] = DEFAULT_SCHEMES,
) -> Tuple[str, ...]:
    """Keep the raw links that are valid URLs scoped under *location*'s directory.

    Order is preserved and duplicates are kept. Malformed and out-of-scope
    links are dropped without raising.
    """
    root = root_directory(location)
    raw = list(raw_links)
    parsed = (parse_url(link, allowed_schemes) for link in raw)
    kept = tuple(url for url in parsed if url is not None and url.startswith(root))
    if len(kept) != len(raw):
        logger.debug(
            "Dropped %d of %d links outside %s or malformed", len(raw) - len(kept), len(raw), root
        )
    return kept
