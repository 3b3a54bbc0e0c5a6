# src/spotprice/shared/validators.py
"""
Validation Utilities - Configuration Value Checks

This module provides validation functions used by the settings model to
reject endpoint URLs, time zones and log levels that would only fail
later at request time.

Files that USE this module:
- spotprice.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import re
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def validate_http_url(url: str) -> bool:
    """
    Validate that a URL is absolute and uses http or https.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False

    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_timezone(name: str) -> bool:
    """
    Validate an IANA time zone name such as "Europe/Helsinki".

    Args:
        name: Time zone name to validate

    Returns:
        True if the zone database knows the name, False otherwise
    """
    if not name or not re.match(r'^[A-Za-z0-9_+\-/]+$', name):
        return False

    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def validate_log_level(level: str) -> bool:
    """Return True if `level` names a standard logging level."""
    if not level:
        return False
    return isinstance(logging.getLevelName(level.upper()), int)
