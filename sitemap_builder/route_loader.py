"""
1.0 Route Loader Module
Loads raw sitemap routes from a CSV file.

Key features:
- Accepts 'path' or 'loc' as the path column
- Optional lastmod / changefreq / priority columns (either naming style)
- Rows without a path are dropped, duplicates are reported but kept
"""

import logging
import os
from typing import Any, List, Optional

import pandas as pd

from sitemap_builder.routes import SitemapPath

logger = logging.getLogger(__name__)

# 1.1 Accepted column names, first match wins
PATH_COLUMNS = ["path", "loc"]
LASTMOD_COLUMNS = ["lastmod", "last_modified"]
CHANGEFREQ_COLUMNS = ["changefreq", "change_frequency"]
PRIORITY_COLUMNS = ["priority"]


def _first_column(df: pd.DataFrame, candidates: List[str]) -> Optional[str]:
    for col in candidates:
        if col in df.columns:
            return col
    return None


def _clean(value: Any) -> Any:
    """Turn pandas missing values into None and strip strings."""
    if value is None or pd.isna(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def load_routes_csv(csv_path: str) -> List[SitemapPath]:
    """
    2.0 Read routes from a CSV file.

    Args:
        csv_path: Path to the CSV file

    Returns:
        SitemapPath entries in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If no path column is present
    """
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Routes CSV not found: {csv_path}")

    # Keep every column as text; priority is converted below
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=True)
    logger.info(f"Loaded routes CSV {csv_path}: {len(df):,} rows, {df.shape[1]} columns")

    path_col = _first_column(df, PATH_COLUMNS)
    if path_col is None:
        raise ValueError(
            f"Routes CSV {csv_path} needs one of the columns {PATH_COLUMNS}; "
            f"found {list(df.columns)}"
        )

    lastmod_col = _first_column(df, LASTMOD_COLUMNS)
    changefreq_col = _first_column(df, CHANGEFREQ_COLUMNS)
    priority_col = _first_column(df, PRIORITY_COLUMNS)

    # 2.1 Drop rows with no path (missing or whitespace only)
    df[path_col] = df[path_col].str.strip()
    blank = df[path_col].isna() | (df[path_col] == "")
    blank_count = blank.sum()
    if blank_count > 0:
        logger.warning(f"Dropping {blank_count:,} rows with an empty '{path_col}'")
        df = df[~blank].copy()

    # 2.2 Report duplicates (kept: collections do not dedupe)
    dup_count = df.duplicated(subset=[path_col]).sum()
    if dup_count > 0:
        logger.warning(f"Routes CSV has {dup_count:,} duplicate paths")

    if priority_col is not None:
        df[priority_col] = pd.to_numeric(df[priority_col], errors="coerce")

    routes = []
    for row in df.to_dict(orient="records"):
        priority = _clean(row[priority_col]) if priority_col else None
        routes.append(
            SitemapPath(
                path=row[path_col],
                last_modified=_clean(row[lastmod_col]) if lastmod_col else None,
                change_frequency=_clean(row[changefreq_col]) if changefreq_col else None,
                priority=float(priority) if priority is not None else None,
            )
        )

    logger.info(f"Built {len(routes):,} routes from {csv_path}")
    return routes
