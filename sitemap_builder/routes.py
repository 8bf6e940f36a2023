"""
1.0 Route Model
Raw path inputs and the normalized route records built from them.

Key features:
- SitemapPath: what callers hand in (relative path + optional metadata)
- NormalizedRoute: absolute, fully populated, frozen record used for rendering
- normalize_route: the only way to turn one into the other
- Locale codes are captured per call, so hreflang reflects add-time settings
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# 1.1 Priority used when a route does not set one
DEFAULT_PRIORITY = 1

# 1.2 Mapping keys accepted for each field (snake_case first, camelCase alias)
FIELD_ALIASES = {
    "last_modified": ("last_modified", "lastModified", "lastmod"),
    "change_frequency": ("change_frequency", "changeFrequency", "changefreq"),
    "priority": ("priority",),
    "hreflang": ("hreflang",),
}


class InvalidRouteError(ValueError):
    """Raised when a structured route input has no usable path."""


@dataclass
class SitemapPath:
    """A relative site path plus optional sitemap metadata."""
    path: str
    last_modified: Optional[Union[date, str]] = None
    change_frequency: Optional[str] = None
    priority: Optional[float] = None
    hreflang: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class NormalizedRoute:
    """An absolute route ready for serialization.

    ``source`` keeps the raw input the route was built from so it can be
    re-normalized against another base URL without double-prefixing.
    """
    path: str
    last_modified: Optional[Union[date, str]] = None
    change_frequency: Optional[str] = None
    priority: Optional[float] = DEFAULT_PRIORITY
    hreflang: Optional[Dict[str, str]] = None
    source: Optional[SitemapPath] = field(default=None, compare=False, repr=False)


RawPathInput = Union[str, SitemapPath, Mapping[str, Any]]


def ltrim_slashes(path: str) -> str:
    """Strip leading slashes only."""
    return path.lstrip("/")


def _pick(data: Mapping[str, Any], name: str) -> Any:
    for key in FIELD_ALIASES[name]:
        if key in data:
            return data[key]
    return None


def to_sitemap_path(raw: RawPathInput) -> SitemapPath:
    """
    2.0 Coerce any accepted raw input into a SitemapPath.

    Args:
        raw: A path string, a SitemapPath, or a mapping with a 'path' key

    Returns:
        A SitemapPath (a copy, never the caller's object)

    Raises:
        TypeError: If given an already-normalized route or an unknown type
        InvalidRouteError: If a structured input has no string path
    """
    if isinstance(raw, NormalizedRoute):
        raise TypeError(
            "Cannot add an already-normalized route; add its raw input instead "
            f"(got absolute path {raw.path!r})"
        )

    if isinstance(raw, str):
        return SitemapPath(path=raw)

    if isinstance(raw, SitemapPath):
        candidate = SitemapPath(
            path=raw.path,
            last_modified=raw.last_modified,
            change_frequency=raw.change_frequency,
            priority=raw.priority,
            hreflang=dict(raw.hreflang) if raw.hreflang is not None else None,
        )
    elif isinstance(raw, Mapping):
        hreflang = _pick(raw, "hreflang")
        candidate = SitemapPath(
            path=raw.get("path"),
            last_modified=_pick(raw, "last_modified"),
            change_frequency=_pick(raw, "change_frequency"),
            priority=_pick(raw, "priority"),
            hreflang=dict(hreflang) if hreflang is not None else None,
        )
    else:
        raise TypeError(f"Unsupported route input type: {type(raw).__name__}")

    if not isinstance(candidate.path, str):
        raise InvalidRouteError(f"Route input is missing a string 'path': {raw!r}")

    return candidate


def normalize_route(
    raw: RawPathInput,
    base_url: str,
    locale_codes: Iterable[str] = (),
) -> NormalizedRoute:
    """
    3.0 Build a NormalizedRoute from a raw input.

    The path becomes ``base_url + "/" + path-without-leading-slashes``.
    With locale codes, hreflang is always recomputed (one entry per code, in
    order) and any hreflang on the input is discarded. Without locale codes
    the input hreflang is kept as given.

    Priority 0 is a real value and is kept; only a missing priority falls
    back to DEFAULT_PRIORITY.

    Args:
        raw: Raw route input
        base_url: Absolute base URL of the site (or locale-scoped base)
        locale_codes: Locale codes in effect at the time of the call

    Returns:
        A frozen NormalizedRoute
    """
    source = to_sitemap_path(raw)
    codes: Tuple[str, ...] = tuple(locale_codes)
    relative = ltrim_slashes(source.path)

    if codes:
        hreflang = {code: f"{base_url}/{code}/{relative}" for code in codes}
    elif source.hreflang is not None:
        hreflang = dict(source.hreflang)
    else:
        hreflang = None

    priority = DEFAULT_PRIORITY if source.priority is None else source.priority

    route = NormalizedRoute(
        path=f"{base_url}/{relative}",
        last_modified=source.last_modified,
        change_frequency=source.change_frequency,
        priority=priority,
        hreflang=hreflang,
        source=source,
    )
    logger.debug(f"Normalized {source.path!r} -> {route.path} ({len(codes)} locales)")
    return route
