"""
Site Build Configuration

Loads site.yaml into an immutable SiteConfig. Values are layered, later layers
overriding earlier ones:

    packaged defaults < site.yaml < environment (.env) < explicit overrides

Examples:
    >>> config = load_site_config()
    >>> config.has(Integration.SITEMAP)
    True

    >>> config = load_site_config(overrides={"adapter": "serverless"})
    >>> config.adapter
    <Adapter.SERVERLESS: 'serverless'>
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.site.defaults import get_default_site_config
from folio.contexts.site.exceptions import SiteConfigError
from folio.contexts.site.logger import _log_debug, log_config_loaded
from folio.utils.urls import host_of, is_absolute_http_url

load_dotenv()
SITE_CONFIG_PATH = Path(
    os.getenv("FOLIO_SITE_CONFIG", Path(__file__).parent / "data" / "site.yaml")
)

# Environment variable -> config key
ENV_OVERRIDES = {
    "SITE_URL": "site_url",
    "FOLIO_ADAPTER": "adapter",
    "FOLIO_INTEGRATIONS": "integrations",
}


class Integration(str, Enum):
    """Pipeline plugins that can be toggled from site.yaml."""

    MARKDOWN = "markdown"
    SITEMAP = "sitemap"
    STYLING = "styling"
    DEFERRED_SCRIPTS = "deferred_scripts"


class Adapter(str, Enum):
    """Deployment target: prebuilt documents or a per-request render function."""

    STATIC = "static"
    SERVERLESS = "serverless"


@dataclass(frozen=True)
class ThirdPartyScript:
    """
    A third-party script (analytics, widgets) injected into every page.

    Exactly one of src/inline is set.
    """

    src: Optional[str] = None
    inline: Optional[str] = None


@dataclass(frozen=True)
class SiteConfig:
    """
    Immutable build configuration.

    Attributes:
        title: Site title used in <title> and the header
        description: Default meta description
        author: Site owner, shown in the footer
        site_url: Public base URL (None disables absolute URLs and the sitemap)
        integrations: Enabled integrations
        adapter: Deployment adapter
        markdown_extensions: Extension names passed to the markdown renderer
        third_party_scripts: Scripts injected into every page
        trailing_slash: Whether page routes end in "/" ("/projects/" vs "/projects")
    """

    title: str
    description: str = ""
    author: str = ""
    site_url: Optional[str] = None
    integrations: FrozenSet[Integration] = field(default_factory=frozenset)
    adapter: Adapter = Adapter.STATIC
    markdown_extensions: Tuple[str, ...] = ()
    third_party_scripts: Tuple[ThirdPartyScript, ...] = ()
    trailing_slash: bool = True

    def has(self, integration: Integration) -> bool:
        """Check whether an integration is enabled."""
        return Integration(integration) in self.integrations

    @property
    def site_host(self) -> Optional[str]:
        """Host of site_url, used to tell own links from external ones."""
        return host_of(self.site_url)


def _env_overrides() -> Dict[str, Any]:
    overrides = {}
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is None or value == "":
            continue
        if key == "integrations":
            value = [item.strip() for item in value.split(",") if item.strip()]
        overrides[key] = value
        _log_debug(f"Environment override {env_name} -> {key}")
    return overrides


def _parse_integrations(values) -> FrozenSet[Integration]:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        raise SiteConfigError("'integrations' must be a list", key="integrations", value=values)

    integrations = set()
    for value in values:
        try:
            integrations.add(Integration(str(value).strip()))
        except ValueError:
            valid = [i.value for i in Integration]
            raise SiteConfigError(
                f"Unknown integration '{value}'. Valid integrations: {valid}",
                key="integrations",
                value=value,
            ) from None
    return frozenset(integrations)


def _parse_adapter(value) -> Adapter:
    try:
        return Adapter(str(value).strip())
    except ValueError:
        valid = [a.value for a in Adapter]
        raise SiteConfigError(
            f"Unknown adapter '{value}'. Valid adapters: {valid}", key="adapter", value=value
        ) from None


def _parse_scripts(values) -> Tuple[ThirdPartyScript, ...]:
    scripts = []
    for index, item in enumerate(values or []):
        if not isinstance(item, dict):
            raise SiteConfigError(
                f"third_party_scripts[{index}] must be a mapping with 'src' or 'inline'",
                key="third_party_scripts",
                value=item,
            )
        src, inline = item.get("src"), item.get("inline")
        if bool(src) == bool(inline):
            raise SiteConfigError(
                f"third_party_scripts[{index}] needs exactly one of 'src' or 'inline'",
                key="third_party_scripts",
                value=item,
            )
        if src and not is_absolute_http_url(src):
            raise SiteConfigError(
                f"third_party_scripts[{index}].src is not a URL",
                key="third_party_scripts",
                value=src,
            )
        scripts.append(ThirdPartyScript(src=src, inline=inline))
    return tuple(scripts)


def build_site_config(data: Dict[str, Any]) -> SiteConfig:
    """
    Validate a merged configuration dict and build a SiteConfig.

    Raises:
        SiteConfigError: If any value is malformed or a key is unknown
    """
    known_keys = set(get_default_site_config())
    unknown = sorted(set(data) - known_keys)
    if unknown:
        raise SiteConfigError(
            f"Unknown configuration keys: {unknown}", key=unknown[0], value=data[unknown[0]]
        )

    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise SiteConfigError("'title' must be a non-empty string", key="title", value=title)

    site_url = data.get("site_url") or None
    if site_url is not None and not is_absolute_http_url(site_url):
        raise SiteConfigError(
            "'site_url' must be an absolute http(s) URL", key="site_url", value=site_url
        )

    markdown = data.get("markdown") or {}
    if not isinstance(markdown, dict):
        raise SiteConfigError("'markdown' must be a mapping", key="markdown", value=markdown)
    extensions = markdown.get("extensions") or []

    return SiteConfig(
        title=title.strip(),
        description=data.get("description") or "",
        author=data.get("author") or "",
        site_url=site_url.rstrip("/") if site_url else None,
        integrations=_parse_integrations(data.get("integrations")),
        adapter=_parse_adapter(data.get("adapter")),
        markdown_extensions=tuple(str(ext) for ext in extensions),
        third_party_scripts=_parse_scripts(data.get("third_party_scripts")),
        trailing_slash=bool(data.get("trailing_slash", True)),
    )


def load_site_config(
    config_path: Path = None,
    overrides: Dict[str, Any] = None,
    use_env: bool = True,
) -> SiteConfig:
    """
    Load site.yaml, apply overrides and validate.

    Args:
        config_path: Path to site.yaml (defaults to FOLIO_SITE_CONFIG or the packaged file)
        overrides: Explicit top-level overrides (highest precedence)
        use_env: Apply SITE_URL / FOLIO_ADAPTER / FOLIO_INTEGRATIONS from the environment

    Returns:
        Validated SiteConfig

    Raises:
        SiteConfigError: If the file is missing, unreadable or malformed
    """
    if config_path is None:
        config_path = SITE_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise SiteConfigError(f"Site config not found: {config_path}")

    try:
        loaded = OmegaConf.load(config_path)
    except (OmegaConfBaseException, ValueError) as e:
        raise SiteConfigError(f"Could not parse site config {config_path}: {e}") from e

    if not isinstance(loaded, DictConfig):
        raise SiteConfigError(f"Site config must be a mapping: {config_path}")

    layers = [OmegaConf.create(get_default_site_config()), loaded]
    if use_env:
        layers.append(OmegaConf.create(_env_overrides()))
    if overrides:
        layers.append(OmegaConf.create(overrides))

    try:
        merged = OmegaConf.to_container(OmegaConf.merge(*layers), resolve=True)
    except OmegaConfBaseException as e:
        raise SiteConfigError(f"Invalid site config {config_path}: {e}") from e

    config = build_site_config(merged)
    log_config_loaded(config, config_path)
    return config
