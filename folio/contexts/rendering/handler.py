"""
Serverless adapter: per-request rendering.

create_app() returns a WSGI callable. Each request is resolved on its own: the
path is looked up in the route table built at startup, the page is rendered for
that request and returned. Nothing is cached or mutated between requests; the
only shared state is the immutable config, content and route table.

Example:
    from wsgiref.simple_server import make_server
    from folio.contexts.rendering.handler import create_app

    make_server("127.0.0.1", 8000, create_app()).serve_forever()
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from folio.contexts.content.loader import ContentCollection, load_content
from folio.contexts.rendering.builder import (
    ASSETS_DIR,
    NOT_FOUND_ROUTE,
    STATIC_PATH,
    STYLESHEET_FILE,
    Route,
    collect_routes,
    render_route,
)
from folio.contexts.rendering.exceptions import RenderError
from folio.contexts.rendering.logger import _log_error, _log_info, log_request
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.sitemap import build_sitemap
from folio.contexts.site.config import Integration, SiteConfig, load_site_config
from folio.utils.timestamp import today

HTML_TYPE = "text/html; charset=utf-8"
XML_TYPE = "application/xml; charset=utf-8"
CSS_TYPE = "text/css; charset=utf-8"
TEXT_TYPE = "text/plain; charset=utf-8"

STATUS_TEXT = {
    200: "200 OK",
    404: "404 Not Found",
    405: "405 Method Not Allowed",
    500: "500 Internal Server Error",
}

Response = Tuple[int, str, bytes]


def _route_table(routes: Iterable[Route]) -> Dict[str, Route]:
    table = {}
    for route in routes:
        table[route.path] = route
        # Accept "/x" and "/x/" for the same page
        if route.path != "/" and route.path.endswith("/"):
            table.setdefault(route.path.rstrip("/"), route)
        elif not route.path.endswith(".html"):
            table.setdefault(route.path + "/", route)
    return table


def create_app(
    config: SiteConfig = None,
    content: ContentCollection = None,
    registry: TemplateRegistry = None,
) -> Callable:
    """
    Create the WSGI application for the serverless adapter.

    Args:
        config: Site configuration (loaded from site.yaml if omitted)
        content: Loaded content (loaded from the content directory if omitted)
        registry: Template registry (defaults to the packaged templates)

    Returns:
        WSGI callable: app(environ, start_response)
    """
    if config is None:
        config = load_site_config()
    if content is None:
        content = load_content(
            markdown_extensions=config.markdown_extensions,
            include_pages=config.has(Integration.MARKDOWN),
        )
    registry = registry or TemplateRegistry()

    routes = collect_routes(config, content)
    table = _route_table(routes)

    sitemap_files = {}
    if config.has(Integration.SITEMAP):
        sitemap = build_sitemap(
            [r.path for r in routes if r.in_sitemap], config.site_url, lastmod=today(), registry=registry
        )
        sitemap_files = {f"/{name}": xml.encode("utf-8") for name, xml in sitemap.files.items()}

    stylesheet_path: Optional[str] = None
    if config.has(Integration.STYLING):
        stylesheet_path = f"/{ASSETS_DIR}/{STYLESHEET_FILE}"

    _log_info(f"Serverless app ready: {len(routes)} route(s)")

    def render(route: Route, status: int) -> Response:
        html = render_route(route, config, content, registry, routes)
        return status, HTML_TYPE, html.encode("utf-8")

    def resolve(path: str) -> Response:
        if path in sitemap_files:
            return 200, XML_TYPE, sitemap_files[path]
        if stylesheet_path and path == stylesheet_path:
            return 200, CSS_TYPE, (STATIC_PATH / STYLESHEET_FILE).read_bytes()
        route = table.get(path)
        if route is not None and route.path != NOT_FOUND_ROUTE:
            return render(route, 200)
        return render(table[NOT_FOUND_ROUTE], 404)

    def app(environ, start_response) -> List[bytes]:
        method = environ.get("REQUEST_METHOD", "GET").upper()
        path = environ.get("PATH_INFO") or "/"

        if method not in ("GET", "HEAD"):
            status, content_type, body = 405, TEXT_TYPE, b"Method Not Allowed\n"
        else:
            try:
                status, content_type, body = resolve(path)
            except RenderError as e:
                _log_error(f"Failed to render {path}: {e.message}")
                status, content_type, body = 500, TEXT_TYPE, b"Internal Server Error\n"

        log_request(method, path, STATUS_TEXT[status])
        headers = [("Content-Type", content_type), ("Content-Length", str(len(body)))]
        if status == 405:
            headers.append(("Allow", "GET, HEAD"))
        start_response(STATUS_TEXT[status], headers)
        return [b""] if method == "HEAD" else [body]

    return app
