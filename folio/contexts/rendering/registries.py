"""
Template Registry

Loads and caches the Jinja2 templates used to render pages and sitemaps.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("FOLIO_TEMPLATES_PATH", Path(__file__).parent / "templates"))

TEMPLATE_SUFFIX = ".jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates.

    Templates are stored as {name}.jinja under the templates directory, where
    name carries the output type (e.g., 'projects.html', 'sitemap.xml').
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Templates directory. Defaults to FOLIO_TEMPLATES_PATH
                            or the packaged templates
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            autoescape=True,
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without the .jinja suffix (e.g., 'projects.html')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(f"{name}{TEMPLATE_SUFFIX}")
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.get_template_path(name)}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a template name."""
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache
