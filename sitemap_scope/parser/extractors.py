# File: sitemap_scope/parser/extractors.py
"""sitemap_scope.parser.extractors: Extraction of raw links from sitemap content.

Each format has its own extractor; :func:`parse_links` dispatches on
:class:`~sitemap_scope.models.SitemapFormat`. Extractors return the raw,
unvalidated strings in document order and never look at the sitemap
location. Scoping happens later in :mod:`sitemap_scope.parser.url_filter`.

Example:
```python
from sitemap_scope.models import SitemapFormat
from sitemap_scope.parser.extractors import parse_links

content = "<urlset><url><loc>https://example.com/a</loc></url></urlset>"
parse_links(SitemapFormat.XML, content)  # ['https://example.com/a']
```
"""
from __future__ import annotations

from typing import Callable, Dict, List

from lxml import etree

from sitemap_scope.errors import MalformedDocumentError
from sitemap_scope.models import SitemapFormat

__all__ = ["parse_links", "parse_xml_links", "parse_rss_links", "parse_txt_links"]

_Extractor = Callable[[str], List[str]]


def _load_root(content: str, fmt: SitemapFormat) -> etree._Element:
    """Parse *content* as a strict XML document and return its root element."""
    # content is already decoded, so the declared encoding is overridden
    parser = etree.XMLParser(
        encoding="utf-8",
        recover=False,
        resolve_entities=False,
        no_network=True,
    )
    try:
        return etree.fromstring(content.encode("utf-8"), parser=parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise MalformedDocumentError(fmt, str(exc) or "empty document") from exc


def _texts(root: etree._Element, path: str) -> List[str]:
    return [str(node.xpath("string()")) for node in root.iterfind(path)]


def parse_xml_links(content: str) -> List[str]:
    """Return the text of every ``url/loc`` element of an XML sitemap.

    Args:
        content: text of the sitemap.xml document.

    Raises:
        MalformedDocumentError: content is not well-formed XML.
    """
    root = _load_root(content, SitemapFormat.XML)
    return _texts(root, "{*}url/{*}loc")


def parse_rss_links(content: str) -> List[str]:
    """Return the text of every ``channel/item/link`` element of an RSS feed."""
    root = _load_root(content, SitemapFormat.RSS)
    return _texts(root, "{*}channel/{*}item/{*}link")


def parse_txt_links(content: str) -> List[str]:
    """Split a plain-text sitemap on any run of whitespace."""
    return content.split()


_EXTRACTORS: Dict[SitemapFormat, _Extractor] = {
    SitemapFormat.XML: parse_xml_links,
    SitemapFormat.RSS: parse_rss_links,
    SitemapFormat.TXT: parse_txt_links,
}


def parse_links(fmt: SitemapFormat, content: str) -> List[str]:
    """Extract raw links from *content* assuming it is written in *fmt*."""
    return _EXTRACTORS[SitemapFormat(fmt)](content)
