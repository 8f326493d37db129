"""
Configuration module for the template screenshot tool.

This package provides centralized configuration management with environment variable support.
"""

from .settings import (
    ALL_STATUSES,
    BROWSER_ARGUMENTS,
    STATUS_COMPLETED,
    STATUS_FAILED,
    TEMPLATE_DIR_PATTERN,
    URL_OVERRIDES,
    Config,
    get_config,
)

__all__ = [
    "Config",
    "get_config",
    "TEMPLATE_DIR_PATTERN",
    "URL_OVERRIDES",
    "BROWSER_ARGUMENTS",
    "STATUS_COMPLETED",
    "STATUS_FAILED",
    "ALL_STATUSES",
]
