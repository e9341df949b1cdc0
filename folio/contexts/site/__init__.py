"""
Site Context

Responsibilities:
- Loads the build configuration (site URL, integrations, deployment adapter)
- Applies environment overrides (.env / process environment)
- Rejects malformed configuration before any page is rendered

Owns: SiteConfig, Integration and Adapter selection
Never: Reads content or renders pages
"""

from folio.contexts.site.config import (
    Adapter,
    Integration,
    SiteConfig,
    ThirdPartyScript,
    load_site_config,
)
from folio.contexts.site.exceptions import SiteConfigError

__all__ = [
    "Adapter",
    "Integration",
    "SiteConfig",
    "ThirdPartyScript",
    "load_site_config",
    "SiteConfigError",
]
