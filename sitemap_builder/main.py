"""
1.0 Main Orchestrator Module
Builds sitemap files from a JSON configuration.

Key features:
- Routes from the config file and/or a CSV file
- Single sitemap, split sitemaps + index, or one sitemap per locale + index
- Run banner and summary in the log

Usage:
    python -m sitemap_builder.main
    python -m sitemap_builder.main --config site/sitemap.json --output public/sitemap.xml
    python -m sitemap_builder.main --print --limit 10
"""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sitemap_builder.config import CONFIG_FILE_PATH, DEFAULT_OUTPUT, load_config
from sitemap_builder.file_writer import put_file
from sitemap_builder.route_loader import load_routes_csv
from sitemap_builder.sitemap import DEFAULT_MAX_URLS_PER_SITEMAP, RouteCollection

logger = logging.getLogger(__name__)


def configure_logging(log_file: Optional[str] = "sitemap_builder.log") -> None:
    """1.1 Setup logging for CLI runs."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


def build_collection(config: Dict[str, Any]) -> RouteCollection:
    """
    2.0 Create a RouteCollection from a validated configuration.

    Config routes are added first, then CSV routes, preserving file order.
    """
    collection = (
        RouteCollection(config["base_url"].rstrip("/"), config.get("locales", []))
        .split(config.get("split", False))
        .max_urls_per_sitemap(config.get("max_urls_per_sitemap", DEFAULT_MAX_URLS_PER_SITEMAP))
        .split_by_languages(config.get("split_by_languages", True))
    )

    collection.add_many(config.get("routes", []))

    csv_path = config.get("routes_csv")
    if csv_path:
        collection.add_many(load_routes_csv(csv_path))

    logger.info(f"Collected {len(collection):,} routes for {collection.base_url}")
    return collection


def write_sitemaps(collection: RouteCollection, output: str, output_dir: Optional[str] = None,
                   limit: Optional[int] = None) -> str:
    """
    3.0 Write sitemap file(s) for the collection.

    - Locales + split_by_languages: one sitemap per locale, index at output
    - limit: a single sitemap with the first `limit` URLs
    - otherwise: save_to (which splits when configured)

    Returns:
        A short description of what was written
    """
    if collection.locale_codes and collection.is_split_by_languages:
        if limit is not None:
            logger.warning(f"Ignoring limit={limit}: per-language sitemaps always include every URL")
        target_dir = output_dir or os.path.dirname(output) or "."
        index_xml = collection.generate_multi_language(output_dir=target_dir)
        put_file(output, index_xml)
        return f"{len(collection.locale_codes)} locale sitemaps in {target_dir}, index at {output}"

    if limit is not None:
        put_file(output, collection.generate(limit))
        return f"{min(limit, len(collection))} URLs to {output}"

    collection.save_to(output)
    return f"{len(collection)} URLs to {output}"


def main(argv: Optional[List[str]] = None) -> int:
    """
    4.0 CLI entry point.
    """
    parser = argparse.ArgumentParser(
        description="Generate XML sitemaps from a JSON configuration"
    )
    parser.add_argument(
        "--config", "-c",
        default=CONFIG_FILE_PATH,
        help=f"Configuration file (default: {CONFIG_FILE_PATH})"
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help=f"Output file, overrides config 'output' (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=None,
        help="Only include the first N URLs"
    )
    parser.add_argument(
        "--print", "-p",
        dest="print_only",
        action="store_true",
        help="Print the sitemap to stdout instead of writing files"
    )

    args = parser.parse_args(argv)
    configure_logging(None if args.print_only else "sitemap_builder.log")

    logger.info("=" * 60)
    logger.info("Starting sitemap generation")
    logger.info(f"Run timestamp: {datetime.now(timezone.utc).isoformat()}")
    logger.info("=" * 60)

    config = load_config(args.config)
    if not config:
        logger.error("Failed to load configuration. Exiting.")
        return 1

    try:
        collection = build_collection(config)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Could not build routes: {type(e).__name__}: {e}")
        return 1

    if args.print_only:
        sys.stdout.write(collection.generate(args.limit))
        return 0

    output = args.output or config.get("output", DEFAULT_OUTPUT)
    try:
        summary = write_sitemaps(collection, output, config.get("output_dir"), args.limit)
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"FAILED writing sitemaps: {type(e).__name__}: {e}")
        return 1

    logger.info("=" * 60)
    logger.info(f"Sitemap generation completed: {summary}")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
