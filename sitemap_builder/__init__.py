"""
Sitemap Builder - Source Package

Modules:
- routes: Raw path inputs and normalized route records
- xml_serializer: <urlset> and <sitemapindex> rendering
- sitemap: RouteCollection, the chainable builder
- file_writer: Writing generated XML to disk
- route_loader: Loading routes from CSV
- config: Configuration loading and validation
- main: Command line entry point
"""

__version__ = "1.0.0"

from sitemap_builder.routes import InvalidRouteError, NormalizedRoute, SitemapPath, normalize_route
from sitemap_builder.sitemap import RouteCollection
from sitemap_builder.xml_serializer import XMLSerializer

__all__ = [
    "InvalidRouteError",
    "NormalizedRoute",
    "RouteCollection",
    "SitemapPath",
    "XMLSerializer",
    "normalize_route",
]
