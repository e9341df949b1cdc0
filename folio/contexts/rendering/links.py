"""
External link decoration.

Rewrites anchors that leave the site so they open in a new tab, the way the
portfolio has always treated outbound links (store pages, demos, write-ups).
"""

from typing import Optional

from bs4 import BeautifulSoup

from folio.utils.urls import host_of, is_absolute_http_url

NEW_TAB_TARGET = "_blank"
NEW_TAB_REL = ("noopener", "noreferrer")


def is_external_link(href: Optional[str], site_host: Optional[str]) -> bool:
    """
    Check whether an href points at a host other than the site's own.

    Relative paths, fragments, mailto:/tel: links and own-host URLs are internal.
    With no site host configured, every absolute http(s) URL is external.

    Examples:
        >>> is_external_link("https://github.com/me", "example.com")
        True
        >>> is_external_link("https://www.example.com/projects/", "example.com")
        False
        >>> is_external_link("/projects/", "example.com")
        False
    """
    if not href:
        return False
    href = href.strip()
    if href.startswith("//"):
        href = "https:" + href
    if not is_absolute_http_url(href):
        return False
    if site_host is None:
        return True
    return host_of(href) != site_host.lower().removeprefix("www.")


def auto_new_tab_external_links(html: str, site_url: Optional[str] = None) -> str:
    """
    Make external anchors open in a new tab.

    Every <a href> pointing to a foreign host gets target="_blank" and a rel
    containing "noopener noreferrer" (existing rel tokens are kept). Anchors to
    the site's own host are left untouched.

    Args:
        html: Document or fragment to rewrite
        site_url: Public site URL; its host counts as internal

    Returns:
        Rewritten HTML, or the input string unchanged if no anchor needed rewriting
    """
    if "<a" not in html.lower():
        return html

    site_host = host_of(site_url)
    soup = BeautifulSoup(html, "html.parser")

    changed = False
    for anchor in soup.find_all("a", href=True):
        if not is_external_link(anchor["href"], site_host):
            continue

        rel = anchor.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        merged_rel = list(rel) + [token for token in NEW_TAB_REL if token not in rel]

        if anchor.get("target") == NEW_TAB_TARGET and merged_rel == list(rel):
            continue

        anchor["target"] = NEW_TAB_TARGET
        anchor["rel"] = merged_rel
        changed = True

    if not changed:
        return html
    return str(soup)
