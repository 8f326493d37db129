"""
Configuration settings for the template screenshot tool.

All settings are managed through environment variables with sensible defaults.
"""

import os
import re
from pathlib import Path


class Config:
    """Centralized configuration with environment variable support."""

    # Browser constants
    VIEWPORT_WIDTH: int = 1920
    VIEWPORT_HEIGHT: int = 1080
    NETWORK_IDLE_MAX_CONNECTIONS: int = 2
    NETWORK_IDLE_WINDOW_SECONDS: float = 0.5
    NETWORK_IDLE_POLL_SECONDS: float = 0.1

    # Server
    BASE_URL: str = os.environ.get("BASE_URL", "http://localhost:8080")

    # Paths
    TEMPLATES_ROOT: Path = Path(os.environ.get("TEMPLATES_ROOT", "."))
    SCREENSHOTS_DIR: Path = Path(
        os.environ.get("SCREENSHOTS_DIR", str(TEMPLATES_ROOT / "screenshots"))
    )

    # Timing (seconds)
    WAIT_TIME_SECONDS: float = float(os.environ.get("SCREENSHOT_WAIT_SECONDS", "6"))
    NAVIGATION_TIMEOUT_SECONDS: float = float(os.environ.get("SCREENSHOT_NAV_TIMEOUT", "30"))

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls) -> list[str]:
        """Validate configuration and return list of errors.

        Returns empty list if configuration is valid.
        """
        errors: list[str] = []

        if not cls.BASE_URL.startswith(("http://", "https://")):
            errors.append(f"BASE_URL must be an http(s) URL, got {cls.BASE_URL!r}")

        if not cls.TEMPLATES_ROOT.is_dir():
            errors.append(f"TEMPLATES_ROOT {cls.TEMPLATES_ROOT} is not a directory")

        if cls.WAIT_TIME_SECONDS < 0:
            errors.append("SCREENSHOT_WAIT_SECONDS must be non-negative")

        if cls.NAVIGATION_TIMEOUT_SECONDS <= 0:
            errors.append("SCREENSHOT_NAV_TIMEOUT must be positive")

        return errors

    @classmethod
    def ensure_directories(cls) -> None:
        """Ensure the screenshot output directory exists."""
        cls.SCREENSHOTS_DIR.mkdir(parents=True, exist_ok=True)


# Template directories look like "05-landing-page"
TEMPLATE_DIR_PATTERN: re.Pattern[str] = re.compile(r"^\d+-.+", re.ASCII)

# Entry points for templates that are not served from the directory root.
# Values are either a path relative to "<base>/<name>/" or a full URL.
URL_OVERRIDES: dict[str, str] = {
    "40-metronic-shop-ui": "theme/shop-index.html",
    "41-metronic-one-page": "theme/index.html",
    "42-navigator-onepage": "index.html",
    "43-metronic-one-page": "theme/",
}

# Chrome flags needed for headless runs in containers and CI
BROWSER_ARGUMENTS: list[str] = [
    "--headless=new",
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-web-security",
    "--hide-scrollbars",
]

# Capture status constants
STATUS_COMPLETED: str = "completed"
STATUS_FAILED: str = "failed"

ALL_STATUSES: list[str] = [
    STATUS_COMPLETED,
    STATUS_FAILED,
]


def get_config() -> type[Config]:
    """Get the Config class."""
    return Config
