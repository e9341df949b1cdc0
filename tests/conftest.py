"""Shared fixtures: small content directories and site configs built in memory."""

import textwrap
from pathlib import Path

import pytest

from folio.contexts.content.loader import ContentCollection, load_content
from folio.contexts.site.config import build_site_config
from folio.contexts.site.defaults import get_default_site_config

SITE_URL = "https://portfolio.example.com"

EXPERIENCE_YAML = """
experience:
  - role: "Flutter Developer (Acme)"
    stack: "Flutter, Firebase"
    playStore: "https://play.google.com/store/apps/details?id=com.acme.app"
    appStore: "https://apps.apple.com/us/app/acme/id123"
    details:
      - "Shipped the Acme field app."
      - "Integrated Google Maps."
  - role: "Backend Developer (Globex)"
    stack: "Go, PostgreSQL"
    details:
      - "Designed REST APIs."
"""

PROJECTS_YAML = """
projects:
  - name: "Route Planner"
    demoLink: "https://planner.example.org"
    repository: "route-planner"
    tags: ["mobile", "maps", "mobile"]
    stack: ["Flutter", "Google Maps"]
    description: "Plans sales routes."
    postLink: "/about/"
  - name: "Sheet Uploader"
    demo_link: "https://uploader.example.org/demo"
"""

ABOUT_MD = """
---
title: About
description: Who I am.
order: 1
---
# About me

See my [GitHub](https://github.com/someone) or the [projects](/projects/) page.
"""


def write_content(root: Path, experience: str = EXPERIENCE_YAML, projects: str = PROJECTS_YAML, pages=None) -> Path:
    """Write a content directory and return its path."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "experience.yaml").write_text(textwrap.dedent(experience), encoding="utf-8")
    (root / "projects.yaml").write_text(textwrap.dedent(projects), encoding="utf-8")
    pages_dir = root / "pages"
    pages_dir.mkdir(exist_ok=True)
    for name, text in (pages if pages is not None else {"about.md": ABOUT_MD}).items():
        (pages_dir / name).write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return root


def make_config(**overrides):
    """Build a SiteConfig from packaged defaults plus overrides, without touching disk or env."""
    data = get_default_site_config()
    data.update({"title": "Test Portfolio", "description": "A test site.", "author": "Tester"})
    data["site_url"] = SITE_URL
    data.update(overrides)
    return build_site_config(data)


@pytest.fixture
def content_dir(tmp_path):
    return write_content(tmp_path / "content")


@pytest.fixture
def site_config():
    return make_config()


@pytest.fixture
def content(content_dir, site_config) -> ContentCollection:
    return load_content(content_dir, markdown_extensions=site_config.markdown_extensions)


@pytest.fixture
def empty_content() -> ContentCollection:
    return ContentCollection()
