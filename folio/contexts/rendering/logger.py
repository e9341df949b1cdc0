"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(adapter: str, output_dir: Path, num_routes: int) -> None:
    """Log start of a site build."""
    _log_info(f"Starting {adapter} build: {num_routes} route(s)")
    _log_info(f"Output directory: {output_dir}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log build result.

    Args:
        result: BuildResult from build_site()
        elapsed_time: Time taken to build
    """
    if result.success:
        _log_success(
            f"Build succeeded: {len(result.pages)} page(s), {len(result.assets)} asset(s), "
            f"{len(result.sitemap_files)} sitemap file(s) ({elapsed_time:.2f}s)"
        )
        for path in result.pages:
            _log_debug(f"  Page: {path}")
    else:
        _log_error(f"Build failed with {len(result.errors)} error(s) ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")
        if len(result.errors) > 5:
            _log_error(f"  ... and {len(result.errors) - 5} more errors")


def log_request(method: str, path: str, status: str) -> None:
    """Log a request served by the serverless handler."""
    _log_debug(f"{method} {path} -> {status}")
