# File: tests/conftest.py
from pathlib import Path
from typing import Callable

import pytest

from sitemap_scope.config import SitemapConfig

LOCATION = "http://example.com/sitemaps/sitemap.xml"


@pytest.fixture()
def location() -> str:
    """Location every sample document below is scoped to."""
    return LOCATION


@pytest.fixture()
def xml_content() -> str:
    """
    Standard XML sitemap with a namespace, an encoding declaration,
    three in-scope links and one link outside the sitemap directory.
    """
    return """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>http://example.com/sitemaps/page1.html</loc><lastmod>2024-01-01</lastmod></url>
  <url><loc>
      http://example.com/sitemaps/page2.html
  </loc></url>
  <url><loc>http://example.com/other/page3.html</loc></url>
  <url><loc>http://example.com/sitemaps/deep/page4.html</loc></url>
</urlset>
"""


@pytest.fixture()
def rss_content() -> str:
    """RSS 2.0 feed with two items; the channel-level link is not an item."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example feed</title>
    <link>http://example.com/sitemaps/</link>
    <item><title>One</title><link>http://example.com/sitemaps/one</link></item>
    <item><title>Two</title><link>http://example.com/sitemaps/two</link></item>
  </channel>
</rss>
"""


@pytest.fixture()
def txt_content() -> str:
    """Plain-text sitemap mixing separators, garbage and an out-of-scope link."""
    return (
        "http://example.com/sitemaps/a\n"
        "http://example.com/sitemaps/b\thttp://example.com/sitemaps/c\r\n"
        "\n"
        "not-a-url   http://elsewhere.com/sitemaps/d\n"
    )


@pytest.fixture()
def default_config() -> SitemapConfig:
    return SitemapConfig()


@pytest.fixture()
def write_source(tmp_path) -> Callable[[str, str], Path]:
    """
    Return a helper writing content to a temporary file.
    """

    def _write(content: str, name: str = "sitemap.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
