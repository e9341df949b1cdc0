"""
Site Builder

Collects the site's routes, renders each one through its Jinja2 template and
writes the result according to the configured adapter:

- static: every route is prebuilt to an HTML file
- serverless: only static assets, the sitemap and a routes.json manifest are
  written; pages are rendered per request by folio.contexts.rendering.handler
"""

import json
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from jinja2 import TemplateError

from folio.contexts.content.loader import ContentCollection
from folio.contexts.content.repositories import get_repository_details
from folio.contexts.rendering.exceptions import RenderError
from folio.contexts.rendering.links import auto_new_tab_external_links
from folio.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_build_result,
    log_build_start,
)
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.scripts import render_script_tags
from folio.contexts.rendering.sitemap import SITEMAP_INDEX_FILE, build_sitemap
from folio.contexts.site.config import Adapter, Integration, SiteConfig
from folio.utils.timestamp import today
from folio.utils.urls import join_url

STATIC_PATH = Path(__file__).parent / "static"
STYLESHEET_FILE = "styles.css"
ASSETS_DIR = "assets"
ROUTES_MANIFEST = "routes.json"
NOT_FOUND_ROUTE = "/404.html"


@dataclass(frozen=True)
class Route:
    """
    A page of the site.

    Attributes:
        path: URL path (e.g., "/", "/projects/", "/404.html")
        template: Template name without .jinja (e.g., "projects.html")
        title: Page title
        description: Meta description (falls back to the site description)
        page_slug: Slug of the markdown page rendered by this route, if any
        in_nav: Whether the route appears in the header navigation
        in_sitemap: Whether the route is listed in the sitemap
    """

    path: str
    template: str
    title: str
    description: Optional[str] = None
    page_slug: Optional[str] = None
    in_nav: bool = True
    in_sitemap: bool = True

    @property
    def output_file(self) -> str:
        """Relative output file for the static adapter ("/x/" -> "x/index.html")."""
        path = self.path.strip("/")
        if not path:
            return "index.html"
        if self.path.endswith("/"):
            return f"{path}/index.html"
        if path.endswith(".html"):
            return path
        return f"{path}.html"


@dataclass
class BuildResult:
    """
    Result of a site build.

    Attributes:
        success: Whether every route and asset was written
        output_dir: Build output directory
        adapter: Adapter used
        pages: Written page files, relative to output_dir
        assets: Written asset files, relative to output_dir
        sitemap_files: Written sitemap files, relative to output_dir
        errors: Errors collected while building
    """

    success: bool
    output_dir: Path
    adapter: Adapter = Adapter.STATIC
    pages: List[str] = field(default_factory=list)
    assets: List[str] = field(default_factory=list)
    sitemap_files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def _route_path(slug: str, trailing_slash: bool) -> str:
    return f"/{slug}/" if trailing_slash else f"/{slug}"


def collect_routes(config: SiteConfig, content: ContentCollection) -> Tuple[Route, ...]:
    """
    Collect every route of the site.

    Markdown pages are routed only when the markdown integration is enabled.

    Raises:
        RenderError: If two routes share a path (e.g., a page named "projects")
    """
    routes = [
        Route(path="/", template="index.html", title=config.title, description=config.description),
        Route(
            path=_route_path("experience", config.trailing_slash),
            template="experience.html",
            title="Experience",
        ),
        Route(
            path=_route_path("projects", config.trailing_slash),
            template="projects.html",
            title="Projects",
        ),
    ]

    if config.has(Integration.MARKDOWN):
        for page in content.pages:
            routes.append(
                Route(
                    path=_route_path(page.slug, config.trailing_slash),
                    template="page.html",
                    title=page.title,
                    description=page.description,
                    page_slug=page.slug,
                )
            )

    routes.append(
        Route(
            path=NOT_FOUND_ROUTE,
            template="404.html",
            title="Page not found",
            in_nav=False,
            in_sitemap=False,
        )
    )

    seen = set()
    for route in routes:
        if route.path in seen:
            raise RenderError(f"Duplicate route '{route.path}'", route=route.path)
        seen.add(route.path)

    return tuple(routes)


def stylesheet_href(config: SiteConfig) -> Optional[str]:
    """Site path of the stylesheet, or None when styling is disabled."""
    if not config.has(Integration.STYLING):
        return None
    return f"/{ASSETS_DIR}/{STYLESHEET_FILE}"


def _base_context(
    route: Route, routes: Tuple[Route, ...], config: SiteConfig, content: ContentCollection
) -> Dict[str, Any]:
    nav = [
        {"path": r.path, "label": "Home" if r.path == "/" else r.title, "active": r.path == route.path}
        for r in routes
        if r.in_nav
    ]

    canonical_url = None
    if config.site_url and route.in_sitemap:
        canonical_url = join_url(config.site_url, route.path)

    sitemap_href = None
    if config.has(Integration.SITEMAP) and config.site_url:
        sitemap_href = f"/{SITEMAP_INDEX_FILE}"

    page = content.get_page(route.page_slug) if route.page_slug else None
    repository = None
    if page is not None and page.repository:
        repository = get_repository_details(page.repository, content.projects)
        if repository is None:
            _log_debug(f"No project for repository '{page.repository}' on page '{page.slug}'")

    return {
        "site": config,
        "page_title": route.title,
        "description": route.description or config.description,
        "canonical_url": canonical_url,
        "sitemap_href": sitemap_href,
        "stylesheet_href": stylesheet_href(config),
        "scripts": render_script_tags(
            config.third_party_scripts, deferred=config.has(Integration.DEFERRED_SCRIPTS)
        ),
        "home_href": "/",
        "nav": nav,
        "experience": [record.to_dict() for record in content.experience],
        "projects": [record.to_dict() for record in content.projects],
        "page": page,
        "repository": repository,
    }


def render_route(
    route: Route,
    config: SiteConfig,
    content: ContentCollection,
    registry: TemplateRegistry = None,
    routes: Tuple[Route, ...] = None,
) -> str:
    """
    Render one route to HTML, then decorate its external links.

    Args:
        route: Route to render
        config: Site configuration
        content: Loaded content
        registry: Template registry (defaults to the packaged templates)
        routes: All routes, for navigation (collected from config/content if omitted)

    Returns:
        Rendered HTML document

    Raises:
        RenderError: If the template is missing or fails to render
    """
    registry = registry or TemplateRegistry()
    if routes is None:
        routes = collect_routes(config, content)

    try:
        template = registry.get_template(route.template)
        html = template.render(**_base_context(route, routes, config, content))
    except TemplateError as e:
        raise RenderError(
            f"Failed to render {route.template}",
            route=route.path,
            template_path=registry.get_template_path(route.template),
            original_error=e,
        ) from e

    return auto_new_tab_external_links(html, config.site_url)


def _ensure_safe_to_clean(output_dir: Path) -> None:
    resolved = output_dir.resolve()
    if resolved == Path(resolved.anchor) or resolved == Path.home().resolve():
        raise ValueError(f"Refusing to clean output directory {resolved}")
    if (resolved / "pyproject.toml").exists():
        raise ValueError(f"Refusing to clean output directory {resolved}: it contains a project")
    if resolved in Path.cwd().resolve().parents:
        raise ValueError(f"Refusing to clean {resolved}: it contains the working directory")
    if resolved == Path.cwd().resolve():
        raise ValueError(f"Refusing to clean the working directory {resolved}")


def _write(output_dir: Path, relative: str, text: str) -> None:
    path = output_dir / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def build_site(
    config: SiteConfig,
    content: ContentCollection,
    output_dir: Path,
    clean: bool = True,
    registry: TemplateRegistry = None,
) -> BuildResult:
    """
    Build the site into output_dir.

    Args:
        config: Site configuration (its adapter decides what is written)
        content: Loaded content
        output_dir: Build output directory (created if missing)
        clean: Empty output_dir first
        registry: Template registry (defaults to the packaged templates)

    Returns:
        BuildResult; failures to render a route are collected into result.errors

    Raises:
        ValueError: If clean=True and output_dir is a directory that must not be emptied
    """
    start = time.perf_counter()
    output_dir = Path(output_dir)
    registry = registry or TemplateRegistry()
    routes = collect_routes(config, content)

    log_build_start(config.adapter.value, output_dir, len(routes))

    if clean and output_dir.exists():
        _ensure_safe_to_clean(output_dir)
        _log_debug(f"Cleaning {output_dir}")
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result = BuildResult(success=True, output_dir=output_dir, adapter=config.adapter)

    if config.adapter == Adapter.STATIC:
        for route in routes:
            try:
                html = render_route(route, config, content, registry, routes)
            except RenderError as e:
                result.errors.append(str(e))
                continue
            _write(output_dir, route.output_file, html)
            result.pages.append(route.output_file)
    else:
        manifest = {
            "adapter": config.adapter.value,
            "routes": [
                {"path": r.path, "template": r.template, "title": r.title} for r in routes
            ],
        }
        _write(output_dir, ROUTES_MANIFEST, json.dumps(manifest, indent=2) + "\n")
        result.assets.append(ROUTES_MANIFEST)

    if config.has(Integration.STYLING):
        target = output_dir / ASSETS_DIR / STYLESHEET_FILE
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(STATIC_PATH / STYLESHEET_FILE, target)
        result.assets.append(f"{ASSETS_DIR}/{STYLESHEET_FILE}")

    if config.has(Integration.SITEMAP):
        sitemap = build_sitemap(
            [r.path for r in routes if r.in_sitemap], config.site_url, lastmod=today(), registry=registry
        )
        for name, xml in sitemap.files.items():
            _write(output_dir, name, xml)
            result.sitemap_files.append(name)

    result.success = not result.errors
    log_build_result(result, time.perf_counter() - start)
    if result.success:
        _log_info(f"Site written to {output_dir}")
    return result
