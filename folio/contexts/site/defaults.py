"""
Default values for the site build configuration.

Used by config.py to fill fields that site.yaml leaves out.
"""

from typing import Any, Dict

DEFAULT_INTEGRATIONS = ["markdown", "sitemap", "styling", "deferred_scripts"]

DEFAULT_MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

DEFAULT_ADAPTER = "static"


def get_default_site_config() -> Dict[str, Any]:
    """
    Get complete default site configuration with all expected fields.

    Returns:
        Dict with every key understood by load_site_config()
    """
    return {
        "title": "Portfolio",
        "description": "",
        "author": "",
        "site_url": None,
        "integrations": list(DEFAULT_INTEGRATIONS),
        "adapter": DEFAULT_ADAPTER,
        "markdown": {"extensions": list(DEFAULT_MARKDOWN_EXTENSIONS)},
        "third_party_scripts": [],
        "trailing_slash": True,
    }
