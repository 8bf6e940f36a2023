"""
ROUTE NORMALIZATION TESTS - Fast, Deterministic, No I/O

Run: pytest tests/test_routes.py
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sitemap_builder.routes import (
    DEFAULT_PRIORITY,
    InvalidRouteError,
    NormalizedRoute,
    SitemapPath,
    ltrim_slashes,
    normalize_route,
)

BASE = "https://example.com"

# =============================================================================
# 1. PATHS
# =============================================================================

@pytest.mark.parametrize("raw", ["about", "/about", "///about"])
def test_path_is_prefixed_with_base_url(raw):
    route = normalize_route(raw, BASE)
    assert route.path == "https://example.com/about"


def test_root_path_keeps_trailing_slash():
    assert normalize_route("/", BASE).path == "https://example.com/"


def test_trailing_content_is_unmodified():
    route = normalize_route("/blog/post/?page=2", BASE)
    assert route.path == "https://example.com/blog/post/?page=2"


def test_ltrim_only_strips_leading_slashes():
    assert ltrim_slashes("//a/b/") == "a/b/"

# =============================================================================
# 2. METADATA
# =============================================================================

def test_missing_priority_defaults_to_one():
    assert normalize_route("/x", BASE).priority == DEFAULT_PRIORITY == 1


def test_zero_priority_is_kept():
    route = normalize_route({"path": "/x", "priority": 0}, BASE)
    assert route.priority == 0


def test_metadata_is_copied_through():
    ts = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    route = normalize_route(
        SitemapPath(path="/x", last_modified=ts, change_frequency="weekly", priority=0.5),
        BASE,
    )
    assert route.last_modified == ts
    assert route.change_frequency == "weekly"
    assert route.priority == 0.5


def test_camel_case_mapping_keys_are_accepted():
    route = normalize_route(
        {"path": "/x", "lastModified": "2024-01-01", "changeFrequency": "daily"}, BASE
    )
    assert route.last_modified == "2024-01-01"
    assert route.change_frequency == "daily"

# =============================================================================
# 3. HREFLANG
# =============================================================================

def test_hreflang_has_one_entry_per_locale_in_order():
    route = normalize_route("/about", BASE, ["en", "ar", "fr"])
    assert list(route.hreflang) == ["en", "ar", "fr"]
    assert route.hreflang["ar"] == "https://example.com/ar/about"


def test_locales_override_input_hreflang():
    raw = {"path": "/about", "hreflang": {"de": "https://other.example/de"}}
    route = normalize_route(raw, BASE, ["en"])
    assert route.hreflang == {"en": "https://example.com/en/about"}


def test_input_hreflang_kept_without_locales():
    raw = {"path": "/about", "hreflang": {"de": "https://other.example/de"}}
    route = normalize_route(raw, BASE)
    assert route.hreflang == {"de": "https://other.example/de"}


def test_no_locales_and_no_input_hreflang_gives_none():
    assert normalize_route("/about", BASE).hreflang is None


def test_input_is_not_mutated():
    raw = SitemapPath(path="/about", hreflang={"de": "x"})
    normalize_route(raw, BASE, ["en"])
    assert raw.path == "/about"
    assert raw.hreflang == {"de": "x"}
    assert raw.priority is None

# =============================================================================
# 4. INVALID INPUT
# =============================================================================

def test_normalized_route_is_rejected():
    route = normalize_route("/about", BASE)
    with pytest.raises(TypeError):
        normalize_route(route, BASE)


def test_mapping_without_path_is_rejected():
    with pytest.raises(InvalidRouteError):
        normalize_route({"priority": 0.3}, BASE)


def test_unknown_input_type_is_rejected():
    with pytest.raises(TypeError):
        normalize_route(42, BASE)


def test_route_keeps_its_raw_source():
    route = normalize_route("/about", BASE, ["en"])
    assert isinstance(route, NormalizedRoute)
    assert route.source.path == "/about"
