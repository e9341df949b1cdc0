"""
Content context logger.

Provides logging interface for the content context with automatic [content] prefix.
All content modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[content]"


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_collection_loaded(collection: str, count: int, path: Path) -> None:
    """Log a loaded record collection."""
    _log_info(f"Loaded {count} {collection} record(s)")
    _log_debug(f"  Source: {path}")
    if count == 0:
        _log_warning(f"{collection} collection is empty, its section will render empty")


def log_pages_loaded(pages, drafts: int, pages_dir: Path) -> None:
    """Log loaded markdown pages."""
    _log_info(f"Loaded {len(pages)} content page(s) ({drafts} draft(s) skipped)")
    _log_debug(f"  Source: {pages_dir}")
    for page in pages:
        _log_debug(f"  /{page.slug}/ -> {page.title}")
