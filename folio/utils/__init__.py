"""
Shared utilities for folio.

Common functionality used across contexts:
- Logger setup
- URL helpers
- Timestamps
"""

from folio.utils.timestamp import now, today
from folio.utils.urls import host_of, is_absolute_http_url, join_url

__all__ = ["host_of", "is_absolute_http_url", "join_url", "now", "today"]
