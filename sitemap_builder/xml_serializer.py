"""
1.0 XML Serializer Module
Renders normalized routes as sitemap XML documents.

Key features:
- <urlset> documents with lastmod, changefreq, priority and xhtml:link alternates
- <sitemapindex> documents listing sitemap locations
- Built with lxml, so every interpolated value is escaped
- Rendering never mutates the held routes; repeated calls give identical output
"""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Union

from lxml import etree

from sitemap_builder.routes import NormalizedRoute

logger = logging.getLogger(__name__)

# 1.1 Namespaces
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _sm(tag: str) -> str:
    return f"{{{SITEMAP_NS}}}{tag}"


def format_lastmod(value: Union[date, str]) -> str:
    """
    2.0 Format a lastmod value.

    - datetime: ISO-8601 in UTC with a 'Z' suffix (naive values are taken as UTC)
    - date: YYYY-MM-DD
    - str: emitted verbatim, no validation
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        iso = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return iso.replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def format_priority(value) -> str:
    """Render 1 and 1.0 as "1", other numbers at full precision, anything else as-is."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class XMLSerializer:
    """
    3.0 XMLSerializer Class
    Accumulates normalized routes and renders them as sitemap XML.
    """

    def __init__(self, *routes: NormalizedRoute):
        self._routes: List[NormalizedRoute] = []
        self.add(*routes)

    def add(self, *routes: NormalizedRoute) -> "XMLSerializer":
        """Append routes in order. Returns self for chaining."""
        self._routes.extend(routes)
        return self

    def __len__(self) -> int:
        return len(self._routes)

    def _snapshot(self, limit: Optional[int] = None) -> List[NormalizedRoute]:
        # Routes are frozen, so a shallow list copy keeps the held list safe
        routes = list(self._routes)
        if limit is not None and limit < len(routes):
            routes = routes[:max(limit, 0)]
        return routes

    @staticmethod
    def _to_string(root: etree._Element) -> str:
        if len(root) == 0:
            # Keep an explicit open/close pair for empty documents
            root.text = "\n"
        body = etree.tostring(root, pretty_print=True, encoding="unicode")
        return XML_HEADER + body

    def generate(self, limit: Optional[int] = None) -> str:
        """
        3.1 Render a <urlset> document.

        Args:
            limit: Render only the first `limit` routes (None renders all)

        Returns:
            The XML document as a string
        """
        routes = self._snapshot(limit)
        urlset = etree.Element(_sm("urlset"), nsmap={None: SITEMAP_NS, "xhtml": XHTML_NS})

        for route in routes:
            url_el = etree.SubElement(urlset, _sm("url"))
            etree.SubElement(url_el, _sm("loc")).text = route.path

            if route.last_modified is not None and route.last_modified != "":
                etree.SubElement(url_el, _sm("lastmod")).text = format_lastmod(route.last_modified)

            if route.change_frequency:
                etree.SubElement(url_el, _sm("changefreq")).text = route.change_frequency

            # Explicit presence check: a priority of 0 is still rendered
            if route.priority is not None:
                etree.SubElement(url_el, _sm("priority")).text = format_priority(route.priority)

            for code, href in (route.hreflang or {}).items():
                link = etree.SubElement(url_el, f"{{{XHTML_NS}}}link")
                link.set("rel", "alternate")
                link.set("hreflang", code)
                link.set("href", href)

        logger.info(f"Rendered urlset with {len(routes)} of {len(self._routes)} URLs")
        return self._to_string(urlset)

    def generate_sitemaps_list(self) -> str:
        """
        3.2 Render a <sitemapindex> document, one <sitemap><loc> per route.

        Only the route path is used; all other fields are ignored.
        """
        routes = self._snapshot()
        index = etree.Element(_sm("sitemapindex"), nsmap={None: SITEMAP_NS})

        for route in routes:
            sitemap_el = etree.SubElement(index, _sm("sitemap"))
            etree.SubElement(sitemap_el, _sm("loc")).text = route.path

        logger.info(f"Rendered sitemap index with {len(routes)} sitemaps")
        return self._to_string(index)
