"""Integration tests for the serverless adapter's per-request WSGI app."""

import pytest
from bs4 import BeautifulSoup

from folio.contexts.content.loader import ContentCollection
from folio.contexts.rendering.handler import create_app

from tests.conftest import make_config


def call(app, path, method="GET"):
    """Invoke a WSGI app and return (status, headers, body)."""
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app({"REQUEST_METHOD": method, "PATH_INFO": path}, start_response))
    return captured["status"], captured["headers"], body


@pytest.fixture
def app(content):
    return create_app(make_config(adapter="serverless"), content)


@pytest.mark.integration
@pytest.mark.parametrize("path", ["/", "/experience/", "/experience", "/projects/", "/about/", "/about"])
def test_known_routes_render(app, path):
    status, headers, body = call(app, path)

    assert status == "200 OK"
    assert headers["Content-Type"].startswith("text/html")
    assert int(headers["Content-Length"]) == len(body)
    assert b"<html" in body


@pytest.mark.integration
def test_unknown_path_renders_404(app):
    status, _, body = call(app, "/nope/")
    assert status == "404 Not Found"
    assert b"Page not found" in body


@pytest.mark.integration
def test_404_page_itself_returns_404(app):
    status, _, _ = call(app, "/404.html")
    assert status == "404 Not Found"


@pytest.mark.integration
def test_sitemap_and_stylesheet_served(app):
    status, headers, body = call(app, "/sitemap-index.xml")
    assert status == "200 OK"
    assert headers["Content-Type"].startswith("application/xml")
    assert b"sitemap-0.xml" in body

    status, headers, _ = call(app, "/assets/styles.css")
    assert status == "200 OK"
    assert headers["Content-Type"].startswith("text/css")


@pytest.mark.integration
def test_head_and_disallowed_methods(app):
    status, headers, body = call(app, "/", method="HEAD")
    assert status == "200 OK"
    assert body == b""
    assert int(headers["Content-Length"]) > 0

    status, headers, _ = call(app, "/", method="POST")
    assert status == "405 Method Not Allowed"
    assert headers["Allow"] == "GET, HEAD"


@pytest.mark.integration
def test_requests_are_independent(app):
    """Rendering the same path twice yields the same document."""
    _, _, first = call(app, "/projects/")
    call(app, "/nope/")
    _, _, second = call(app, "/projects/")
    assert first == second


@pytest.mark.integration
def test_empty_content_renders(tmp_path):
    app = create_app(make_config(adapter="serverless"), ContentCollection())
    status, _, body = call(app, "/")
    soup = BeautifulSoup(body, "html.parser")

    assert status == "200 OK"
    assert soup.find("section", id="projects").find("article") is None


@pytest.mark.integration
def test_external_links_decorated_per_request(app):
    _, _, body = call(app, "/experience/")
    store = BeautifulSoup(body, "html.parser").find("a", string="App Store")
    assert store["target"] == "_blank"
