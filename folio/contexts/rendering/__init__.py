"""
Rendering Context

Responsibilities:
- Collects routes and renders pages through Jinja2 templates
- Decorates external links, injects third-party scripts
- Emits the sitemap and static assets
- Writes static output or serves pages per request (serverless adapter)

Owns: Templates, page output, sitemap, serverless handler
Never: Modifies content records or site configuration
"""

from folio.contexts.rendering.builder import (
    BuildResult,
    Route,
    build_site,
    collect_routes,
    render_route,
)
from folio.contexts.rendering.exceptions import RenderError
from folio.contexts.rendering.handler import create_app
from folio.contexts.rendering.links import auto_new_tab_external_links, is_external_link
from folio.contexts.rendering.sitemap import SitemapFiles, build_sitemap

__all__ = [
    "BuildResult",
    "Route",
    "build_site",
    "collect_routes",
    "render_route",
    "create_app",
    "auto_new_tab_external_links",
    "is_external_link",
    "build_sitemap",
    "SitemapFiles",
    "RenderError",
]
