"""Custom exceptions for the site context."""

from typing import Any, Optional


class SiteConfigError(ValueError):
    """
    Exception raised when the build configuration is malformed.

    Attributes:
        message: Error description
        key: Configuration key that failed validation (e.g., 'adapter')
        value: Offending value
    """

    def __init__(self, message: str, key: Optional[str] = None, value: Any = None):
        self.message = message
        self.key = key
        self.value = value

        parts = [message]
        if key is not None:
            parts.append(f"Key: {key}")
        if value is not None:
            parts.append(f"Value: {value!r}")

        super().__init__("\n".join(parts))
