"""
ROUTE LOADER TESTS - CSV input via pandas

Run: pytest tests/test_route_loader.py
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sitemap_builder.route_loader import load_routes_csv


def write_csv(tmp_path, text: str) -> str:
    path = tmp_path / "routes.csv"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_loads_paths_and_metadata(tmp_path):
    csv_path = write_csv(
        tmp_path,
        "path,lastmod,changefreq,priority\n"
        "/,2024-01-01,daily,1\n"
        "/about,,weekly,0.5\n"
        "/zero,,,0\n",
    )
    routes = load_routes_csv(csv_path)

    assert [r.path for r in routes] == ["/", "/about", "/zero"]
    assert routes[0].last_modified == "2024-01-01"
    assert routes[0].change_frequency == "daily"
    assert routes[0].priority == 1.0
    assert routes[1].last_modified is None
    assert routes[1].priority == 0.5
    assert routes[2].change_frequency is None
    assert routes[2].priority == 0.0


def test_loc_column_alias(tmp_path):
    csv_path = write_csv(tmp_path, "loc,last_modified\n/a,2024-02-02\n")
    routes = load_routes_csv(csv_path)
    assert routes[0].path == "/a"
    assert routes[0].last_modified == "2024-02-02"
    assert routes[0].priority is None


def test_rows_without_path_are_dropped_duplicates_kept(tmp_path):
    csv_path = write_csv(tmp_path, "path,priority\n/a,\n,0.3\n/a,0.2\n")
    routes = load_routes_csv(csv_path)
    assert [r.path for r in routes] == ["/a", "/a"]
    assert routes[0].priority is None
    assert routes[1].priority == 0.2


def test_missing_path_column(tmp_path):
    csv_path = write_csv(tmp_path, "url,priority\n/a,1\n")
    with pytest.raises(ValueError):
        load_routes_csv(csv_path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_routes_csv(str(tmp_path / "missing.csv"))


def test_whitespace_only_paths_are_dropped(tmp_path):
    csv_path = write_csv(tmp_path, "path,priority\n   ,0.3\n /b ,0.2\n")
    routes = load_routes_csv(csv_path)
    assert [r.path for r in routes] == ["/b"]
    assert routes[0].priority == 0.2
