"""
1.0 Route Collection Module
Holds sitemap configuration and routes, and drives XML generation.

Key features:
- Chainable configuration (locales, split, max URLs per sitemap, split by languages)
- Routes normalized at add-time against the current base URL and locale codes
- <urlset> and <sitemapindex> generation through a fresh XMLSerializer per call
- Multi-language workflow: one sitemap per locale plus an index referencing them
- Optional splitting into several sitemap files of bounded size

Usage:
    sitemap = RouteCollection("https://example.com", ["en", "ar"])
    sitemap.add("/")
    sitemap.add({"path": "/about", "priority": 0.8})
    sitemap.save_to("public/sitemap.xml")
"""

import logging
import os
from dataclasses import replace
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from sitemap_builder.file_writer import put_file
from sitemap_builder.routes import NormalizedRoute, RawPathInput, normalize_route
from sitemap_builder.xml_serializer import XMLSerializer

logger = logging.getLogger(__name__)

# 1.1 Defaults (sitemaps.org protocol limit)
DEFAULT_MAX_URLS_PER_SITEMAP = 50000

Writer = Callable[[str, str], object]


class RouteCollection:
    """
    2.0 RouteCollection Class
    Ordered, append-only list of normalized routes plus generation options.
    """

    def __init__(self, base_url: str, locale_codes: Sequence[str] = ()):
        """
        2.1 Initialize the collection.

        Args:
            base_url: Absolute site URL, e.g. "https://example.com"
            locale_codes: Locale codes used to build hreflang alternates
        """
        self._base_url = base_url
        self._locale_codes: Tuple[str, ...] = tuple(locale_codes)
        self._routes: List[NormalizedRoute] = []

        self._split = False
        self._max_urls_per_sitemap = DEFAULT_MAX_URLS_PER_SITEMAP
        self._split_by_languages = True

    def __repr__(self) -> str:
        return (
            f"RouteCollection(base_url={self._base_url!r}, "
            f"locales={list(self._locale_codes)}, routes={len(self._routes)})"
        )

    # =========================================================================
    # 3.0 CONFIGURATION
    # =========================================================================

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def locale_codes(self) -> Tuple[str, ...]:
        return self._locale_codes

    @property
    def is_split(self) -> bool:
        return self._split

    @property
    def urls_per_sitemap(self) -> int:
        return self._max_urls_per_sitemap

    @property
    def is_split_by_languages(self) -> bool:
        return self._split_by_languages

    def set_locales(self, locale_codes: Sequence[str]) -> "RouteCollection":
        """
        3.1 Replace the locale codes.

        Only routes added after this call see the new codes; routes already
        held keep the hreflang computed when they were added.
        """
        self._locale_codes = tuple(locale_codes)
        return self

    def split(self, split: bool = True) -> "RouteCollection":
        """Split saved output into several sitemaps when it exceeds the limit."""
        self._split = split
        return self

    def max_urls_per_sitemap(self, max_urls: int) -> "RouteCollection":
        """Maximum number of URLs per sitemap file when splitting."""
        self._max_urls_per_sitemap = max_urls
        return self

    def split_by_languages(self, split_by_languages: bool = True) -> "RouteCollection":
        """Whether locale-aware output is written as one sitemap per language."""
        self._split_by_languages = split_by_languages
        return self

    # =========================================================================
    # 4.0 ROUTES
    # =========================================================================

    def add(self, path: RawPathInput) -> "RouteCollection":
        """
        4.1 Normalize a raw path and append it.

        Args:
            path: A relative path string, a SitemapPath, or a mapping

        Raises:
            TypeError: If given an already-normalized route
            InvalidRouteError: If a structured input has no string path
        """
        self._routes.append(normalize_route(path, self._base_url, self._locale_codes))
        return self

    def add_many(self, paths: Iterable[RawPathInput]) -> "RouteCollection":
        for path in paths:
            self.add(path)
        return self

    @property
    def length(self) -> int:
        return len(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[NormalizedRoute]:
        return iter(tuple(self._routes))

    @property
    def routes(self) -> Tuple[NormalizedRoute, ...]:
        return tuple(self._routes)

    def chunks(self) -> List[List[NormalizedRoute]]:
        """
        4.2 Group the routes into sitemap-sized chunks.

        Returns a single chunk unless splitting is enabled with a positive limit.
        """
        routes = list(self._routes)
        size = self._max_urls_per_sitemap

        if not self._split:
            return [routes]
        if size <= 0:
            logger.warning(f"Ignoring non-positive max_urls_per_sitemap={size}; not splitting")
            return [routes]

        return [routes[i:i + size] for i in range(0, len(routes), size)] or [routes]

    # =========================================================================
    # 5.0 GENERATION
    # =========================================================================

    def generate(self, limit: Optional[int] = None) -> str:
        """
        5.1 Generate the <urlset> XML string.

        Args:
            limit: Only include the first `limit` routes (collection is untouched)
        """
        return XMLSerializer(*self._routes).generate(limit)

    def to_xml(self) -> str:
        return self.generate()

    def generate_sitemaps_list(self) -> str:
        """5.2 Generate a <sitemapindex> listing every route path."""
        return XMLSerializer(*self._routes).generate_sitemaps_list()

    def _write_parts(self, stem: str, suffix: str, directory: str, writer: Writer) -> List[str]:
        """
        5.3 Write each chunk to `<stem>-<n><suffix>` (or `<stem><suffix>` when
        there is only one chunk) in directory.

        Returns:
            The file names written, in order
        """
        chunks = self.chunks()
        if len(chunks) == 1:
            names = [f"{stem}{suffix}"]
        else:
            names = [f"{stem}-{n}{suffix}" for n in range(1, len(chunks) + 1)]

        for name, chunk in zip(names, chunks):
            writer(os.path.join(directory, name), XMLSerializer(*chunk).generate())

        return names

    def generate_multi_language(self, output_dir: str = ".", writer: Writer = put_file) -> str:
        """
        5.4 Write one sitemap per locale code and return the index referencing them.

        For each locale code a child collection is built on
        `<base_url>/<code>` with no locale codes, every route is re-added from
        its raw input, and its sitemap is written to
        `<output_dir>/sitemap-<code>.xml` (split into numbered parts when
        splitting applies).

        Args:
            output_dir: Directory that receives the per-locale sitemap files
            writer: Callable(path, content) used to persist each file

        Returns:
            The <sitemapindex> XML string
        """
        sitemap_index = RouteCollection(self._base_url)

        for locale_code in self._locale_codes:
            child = RouteCollection(f"{self._base_url}/{locale_code}")
            child.split(self._split).max_urls_per_sitemap(self._max_urls_per_sitemap)

            for route in self._routes:
                # Locale sitemaps carry no alternates, even ones given on the input
                child.add(replace(route.source, hreflang=None))

            names = child._write_parts(f"sitemap-{locale_code}", ".xml", output_dir, writer)
            for name in names:
                sitemap_index.add(f"/{name}")

            logger.info(f"Locale {locale_code}: {len(child)} URLs in {len(names)} sitemap(s)")

        logger.info(f"Multi-language index references {len(sitemap_index)} sitemaps")
        return sitemap_index.generate_sitemaps_list()

    # =========================================================================
    # 6.0 SAVING
    # =========================================================================

    def save_to(self, destination: str, writer: Writer = put_file) -> "RouteCollection":
        """
        6.1 Save the sitemap to destination.

        When splitting applies, numbered part files are written next to
        destination and destination receives a <sitemapindex> instead.

        Raises:
            OSError: Propagated unchanged from the writer
        """
        chunks = self.chunks()

        if len(chunks) <= 1:
            writer(destination, self.generate())
            logger.info(f"Saved {len(self)} URLs to {destination}")
            return self

        directory, filename = os.path.split(destination)
        stem, suffix = os.path.splitext(filename)
        names = self._write_parts(stem, suffix or ".xml", directory, writer)

        sitemap_index = RouteCollection(self._base_url)
        sitemap_index.add_many(f"/{name}" for name in names)
        writer(destination, sitemap_index.generate_sitemaps_list())

        logger.info(f"Saved {len(self)} URLs across {len(names)} sitemaps, index at {destination}")
        return self
