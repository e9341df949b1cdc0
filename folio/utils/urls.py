"""
URL helpers shared by the content and rendering contexts.
"""

from typing import Optional
from urllib.parse import urlsplit


def is_absolute_http_url(value: str) -> bool:
    """
    Check whether a string is an absolute http(s) URL with a host.

    Examples:
        >>> is_absolute_http_url("https://example.com/a")
        True
        >>> is_absolute_http_url("/projects/")
        False
        >>> is_absolute_http_url("https://")
        False
    """
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def host_of(url: Optional[str]) -> Optional[str]:
    """
    Lowercased host of an absolute URL, without port or a leading "www.".

    Returns None for relative or malformed URLs.
    """
    if not url or not is_absolute_http_url(url):
        return None
    host = urlsplit(url.strip()).hostname.lower()
    if host.startswith("www."):
        host = host[4:]
    return host


def join_url(base: str, path: str) -> str:
    """
    Join a site base URL and a site-relative path with exactly one slash.

    Example:
        >>> join_url("https://example.com/", "/projects/")
        'https://example.com/projects/'
    """
    return base.rstrip("/") + "/" + path.lstrip("/")
