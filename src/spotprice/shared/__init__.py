# src/spotprice/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from spotprice.shared.validators import (
    validate_http_url,
    validate_log_level,
    validate_timezone,
)
from spotprice.shared.logging_conf import configure_from_settings, setup_logging

__all__ = [
    "validate_http_url",
    "validate_log_level",
    "validate_timezone",
    "setup_logging",
    "configure_from_settings",
]
