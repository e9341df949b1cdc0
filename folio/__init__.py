"""
folio - a portfolio static-site generator

Builds a personal portfolio website (work experience and side projects) from
hand-authored YAML and markdown content using Jinja2 templates.

Architecture:
- Site Context: Build configuration (site URL, integrations, deployment adapter)
- Content Context: Experience and project records, markdown pages, repository lookup
- Rendering Context: Page rendering, link decoration, sitemap emission, serverless handler
"""

__version__ = "0.1.0"
