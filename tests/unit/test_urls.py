"""Unit tests for URL helpers."""

import pytest

from folio.utils.urls import host_of, is_absolute_http_url, join_url


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("https://example.com", True),
        ("http://example.com/a?b=c", True),
        ("https://", False),
        ("/projects/", False),
        ("mailto:me@example.com", False),
        ("", False),
        (None, False),
    ],
)
def test_is_absolute_http_url(value, expected):
    assert is_absolute_http_url(value) is expected


@pytest.mark.unit
def test_host_of_strips_www_and_port():
    assert host_of("https://WWW.Example.com:8443/x") == "example.com"
    assert host_of("/relative") is None
    assert host_of(None) is None


@pytest.mark.unit
def test_join_url():
    assert join_url("https://example.com/", "/projects/") == "https://example.com/projects/"
    assert join_url("https://example.com", "sitemap-0.xml") == "https://example.com/sitemap-0.xml"
