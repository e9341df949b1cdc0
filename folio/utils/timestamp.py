"""Timestamp helpers."""

from datetime import date, datetime


def now() -> str:
    """Current local time formatted for log directory names (YYYYmmdd_HHMMSS)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Current date in W3C date format (YYYY-MM-DD), as used by sitemap <lastmod>."""
    return date.today().isoformat()
