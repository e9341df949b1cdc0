"""Unit tests for site configuration loading."""

import pytest

from folio.contexts.site.config import (
    Adapter,
    Integration,
    SITE_CONFIG_PATH,
    load_site_config,
)
from folio.contexts.site.exceptions import SiteConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("SITE_URL", "FOLIO_ADAPTER", "FOLIO_INTEGRATIONS"):
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path, text):
    path = tmp_path / "site.yaml"
    path.write_text(text)
    return path


@pytest.mark.unit
def test_packaged_config_loads():
    config = load_site_config(SITE_CONFIG_PATH)

    assert config.site_url == "https://ms-arifin.vercel.app"
    assert config.adapter == Adapter.STATIC
    assert config.integrations == frozenset(Integration)
    assert config.site_host == "ms-arifin.vercel.app"


@pytest.mark.unit
def test_defaults_fill_missing_keys(tmp_path):
    config = load_site_config(write_config(tmp_path, "title: Minimal\n"))

    assert config.title == "Minimal"
    assert config.site_url is None
    assert config.adapter == Adapter.STATIC
    assert config.has(Integration.SITEMAP)
    assert config.markdown_extensions == ("fenced_code", "tables")
    assert config.third_party_scripts == ()


@pytest.mark.unit
def test_integrations_can_be_narrowed(tmp_path):
    config = load_site_config(write_config(tmp_path, "title: T\nintegrations: [sitemap]\n"))
    assert config.integrations == frozenset({Integration.SITEMAP})
    assert not config.has(Integration.STYLING)


@pytest.mark.unit
def test_serverless_adapter_selection(tmp_path):
    path = write_config(tmp_path, "title: T\nadapter: serverless\n")
    assert load_site_config(path).adapter == Adapter.SERVERLESS


@pytest.mark.unit
def test_explicit_overrides_win_over_file_and_env(tmp_path, monkeypatch):
    monkeypatch.setenv("FOLIO_ADAPTER", "serverless")
    path = write_config(tmp_path, "title: T\nadapter: static\n")

    assert load_site_config(path).adapter == Adapter.SERVERLESS
    assert load_site_config(path, overrides={"adapter": "static"}).adapter == Adapter.STATIC
    assert load_site_config(path, use_env=False).adapter == Adapter.STATIC


@pytest.mark.unit
def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("SITE_URL", "https://preview.example.com/")
    monkeypatch.setenv("FOLIO_INTEGRATIONS", "sitemap, styling")

    config = load_site_config(write_config(tmp_path, "title: T\n"))

    assert config.site_url == "https://preview.example.com"
    assert config.integrations == frozenset({Integration.SITEMAP, Integration.STYLING})


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,key",
    [
        ("title: T\nintegrations: [sitemap, analytics]\n", "integrations"),
        ("title: T\nadapter: edge\n", "adapter"),
        ("title: T\nsite_url: not-a-url\n", "site_url"),
        ("title: ''\n", "title"),
        ("title: T\ntheme: dark\n", "theme"),
        ("title: T\nthird_party_scripts:\n  - src: https://a.example.com/a.js\n    inline: x()\n", "third_party_scripts"),
        ("title: T\nthird_party_scripts:\n  - src: /local.js\n", "third_party_scripts"),
    ],
)
def test_malformed_config_fails(tmp_path, text, key):
    with pytest.raises(SiteConfigError) as exc_info:
        load_site_config(write_config(tmp_path, text))
    assert exc_info.value.key == key


@pytest.mark.unit
def test_missing_config_file(tmp_path):
    with pytest.raises(SiteConfigError):
        load_site_config(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_top_level_list_config_fails(tmp_path):
    with pytest.raises(SiteConfigError):
        load_site_config(write_config(tmp_path, "- title\n"))


@pytest.mark.unit
def test_third_party_scripts_parsed(tmp_path):
    path = write_config(
        tmp_path,
        "title: T\n"
        "third_party_scripts:\n"
        "  - src: https://cdn.example.com/a.js\n"
        "  - inline: console.log('hi')\n",
    )
    scripts = load_site_config(path).third_party_scripts

    assert scripts[0].src == "https://cdn.example.com/a.js"
    assert scripts[0].inline is None
    assert scripts[1].inline == "console.log('hi')"
