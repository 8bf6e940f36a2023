"""
File writer used by RouteCollection to persist generated XML.
"""

import logging
import os

logger = logging.getLogger(__name__)


def put_file(path: str, content: str, encoding: str = "utf-8") -> str:
    """
    Write content to path, creating parent directories and overwriting any
    existing file. OSError propagates to the caller.

    Returns:
        The path written to
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding=encoding) as f:
        f.write(content)

    logger.info(f"Wrote {path} ({len(content):,} chars)")
    return path
