import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_FILE_PATH = "sitemap.json"

DEFAULT_OUTPUT = "sitemap.xml"

# Route entry keys whose values are emitted verbatim as element text
ROUTE_STRING_KEYS = (
    "lastmod", "last_modified", "lastModified",
    "changefreq", "change_frequency", "changeFrequency",
)


def load_config(config_path: str = CONFIG_FILE_PATH) -> Optional[Dict[str, Any]]:
    """Loads the sitemap configuration from a JSON file."""
    if not os.path.exists(config_path):
        logger.error(f"Configuration file not found: {config_path}")
        return None
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
        logger.info(f"Successfully loaded configuration from {config_path}")
        if not validate_config(config_data):
            return None
        return config_data
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON from {config_path}: {e}")
        return None
    except OSError as e:
        logger.error(f"Could not read configuration {config_path}: {e}")
        return None


def validate_config(config: Dict[str, Any]) -> bool:
    """Validates the structure and content of the configuration."""
    if not isinstance(config, dict):
        logger.error("Configuration must be a dictionary.")
        return False

    base_url = config.get("base_url")
    if not isinstance(base_url, str) or not base_url.strip():
        logger.error("'base_url' key is missing or not a non-empty string.")
        return False

    locales = config.get("locales", [])
    if not isinstance(locales, list) or not all(isinstance(code, str) and code for code in locales):
        logger.error("'locales' must be a list of non-empty strings.")
        return False

    routes = config.get("routes", [])
    if not isinstance(routes, list):
        logger.error("'routes' must be a list.")
        return False

    for i, entry in enumerate(routes):
        if isinstance(entry, str):
            continue
        if not isinstance(entry, dict):
            logger.error(f"Route entry at index {i} is neither a string nor a dictionary.")
            return False
        if not isinstance(entry.get("path"), str):
            logger.error(f"Route entry at index {i} is missing required key: 'path'.")
            return False
        priority = entry.get("priority")
        if priority is not None and (isinstance(priority, bool) or not isinstance(priority, (int, float))):
            logger.error(f"Value for 'priority' in route entry at index {i} must be a number.")
            return False
        for key in ROUTE_STRING_KEYS:
            if entry.get(key) is not None and not isinstance(entry[key], str):
                logger.error(f"Value for '{key}' in route entry at index {i} must be a string.")
                return False
        hreflang = entry.get("hreflang")
        if hreflang is not None and (
            not isinstance(hreflang, dict)
            or not all(isinstance(k, str) and isinstance(v, str) for k, v in hreflang.items())
        ):
            logger.error(f"Value for 'hreflang' in route entry at index {i} must map strings to strings.")
            return False

    for key in ("routes_csv", "output", "output_dir"):
        if key in config and (not isinstance(config[key], str) or not config[key].strip()):
            logger.error(f"Value for key '{key}' must be a non-empty string.")
            return False

    for key in ("split", "split_by_languages"):
        if key in config and not isinstance(config[key], bool):
            logger.error(f"Value for key '{key}' must be true or false.")
            return False

    max_urls = config.get("max_urls_per_sitemap")
    if max_urls is not None and (isinstance(max_urls, bool) or not isinstance(max_urls, int)):
        logger.error("'max_urls_per_sitemap' must be an integer.")
        return False

    if not routes and "routes_csv" not in config:
        logger.warning("No 'routes' or 'routes_csv' configured. The sitemap will be empty.")
        # Allowed: an empty sitemap is still a valid document.

    logger.info("Configuration validation successful.")
    return True
