"""Unit tests for TemplateRegistry class."""

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from folio.contexts.rendering.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("sitemap.xml")
    assert registry.is_cached("sitemap.xml")

    template2 = registry.get_template("sitemap.xml")
    assert template1 is template2

    registry.clear_cache()
    assert not registry.is_cached("sitemap.xml")


@pytest.mark.unit
def test_template_not_found():
    registry = TemplateRegistry()
    with pytest.raises(TemplateNotFound) as exc_info:
        registry.get_template("nonexistent.html")
    assert "nonexistent.html.jinja" in str(exc_info.value)


@pytest.mark.unit
def test_get_template_path():
    registry = TemplateRegistry()
    assert registry.get_template_path("projects.html") == registry.templates_path / "projects.html.jinja"
    assert registry.get_template_path("projects.html").exists()


@pytest.mark.unit
def test_autoescape_and_strict_undefined(tmp_path):
    (tmp_path / "hello.html.jinja").write_text("<p>{{ name }}</p>")
    registry = TemplateRegistry(tmp_path)
    template = registry.get_template("hello.html")

    assert template.render(name="<b>x</b>") == "<p>&lt;b&gt;x&lt;/b&gt;</p>"
    with pytest.raises(UndefinedError):
        template.render()
