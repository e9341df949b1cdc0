"""
Sitemap generation.

Emits a sitemap index (sitemap-index.xml) pointing at one or more URL sets
(sitemap-0.xml, sitemap-1.xml, ...), each holding at most MAX_URLS_PER_FILE URLs.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from folio.contexts.rendering.logger import _log_debug, _log_warning
from folio.contexts.rendering.registries import TemplateRegistry
from folio.utils.urls import join_url

SITEMAP_INDEX_FILE = "sitemap-index.xml"
SITEMAP_FILE_PATTERN = "sitemap-{}.xml"
MAX_URLS_PER_FILE = 45000

# Routes never listed in the sitemap
EXCLUDED_ROUTES = {"/404.html", "/404", "/404/"}


@dataclass
class SitemapFiles:
    """
    Rendered sitemap documents keyed by file name.

    Attributes:
        files: {"sitemap-index.xml": "<?xml ...", "sitemap-0.xml": "<?xml ...", ...}
        urls: Absolute URLs listed, in order
    """

    files: Dict[str, str] = field(default_factory=dict)
    urls: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.files)


def sitemap_urls(routes: Iterable[str], site_url: str) -> List[str]:
    """Absolute, de-duplicated, sorted URLs for the given route paths."""
    paths = sorted({route for route in routes if route not in EXCLUDED_ROUTES})
    return [join_url(site_url, path) for path in paths]


def build_sitemap(
    routes: Iterable[str],
    site_url: Optional[str],
    lastmod: Optional[str] = None,
    registry: TemplateRegistry = None,
) -> SitemapFiles:
    """
    Render the sitemap index and URL sets for a list of route paths.

    Args:
        routes: Route paths (e.g., ["/", "/projects/"])
        site_url: Public site URL; without one no sitemap can be produced
        lastmod: Optional W3C date applied to every URL
        registry: Template registry (defaults to the packaged templates)

    Returns:
        SitemapFiles (empty when site_url is missing)
    """
    if not site_url:
        _log_warning("Sitemap skipped: no site_url configured")
        return SitemapFiles()

    registry = registry or TemplateRegistry()
    urls = sitemap_urls(routes, site_url)

    chunks = [urls[i : i + MAX_URLS_PER_FILE] for i in range(0, len(urls), MAX_URLS_PER_FILE)] or [[]]

    result = SitemapFiles(urls=urls)
    urlset_template = registry.get_template("sitemap.xml")
    chunk_names = []
    for number, chunk in enumerate(chunks):
        name = SITEMAP_FILE_PATTERN.format(number)
        result.files[name] = urlset_template.render(urls=chunk, lastmod=lastmod)
        chunk_names.append(name)

    index_template = registry.get_template("sitemap-index.xml")
    result.files[SITEMAP_INDEX_FILE] = index_template.render(
        sitemaps=[join_url(site_url, name) for name in chunk_names], lastmod=lastmod
    )

    _log_debug(f"Sitemap: {len(urls)} URL(s) in {len(chunk_names)} file(s)")
    return result
