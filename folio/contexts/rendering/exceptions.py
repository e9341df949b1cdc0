"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional


class RenderError(Exception):
    """
    Exception raised when a route cannot be rendered.

    Attributes:
        message: Error description
        route: Route path being rendered (e.g., '/projects/')
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        route: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.route = route
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if route:
            parts.append(f"Route: {route}")
        if template_path:
            parts.append(f"Template: {template_path}")
        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
