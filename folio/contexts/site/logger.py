"""
Site context logger.

Provides logging interface for the site context with automatic [site] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[site]"


def _log_info(message: str) -> None:
    """Log info message with [site] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [site] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_config_loaded(config, source) -> None:
    """Log a summary of the loaded build configuration."""
    _log_info(f"Loaded site config from {source}")
    _log_info(f"  Site URL: {config.site_url or '(none)'}")
    _log_info(f"  Adapter: {config.adapter.value}")
    integrations = ", ".join(sorted(i.value for i in config.integrations)) or "(none)"
    _log_debug(f"  Integrations: {integrations}")
