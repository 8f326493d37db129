"""Run controller: discover templates, capture each, report the outcome."""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request

from .browser import launch_browser
from .capture import RunSummary, capture_template
from .config import Config
from .discovery import discover_template_dirs
from .urls import resolve_url

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to the console in a human-readable format."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def is_url_reachable(url: str, timeout_seconds: int = 3) -> bool:
    """Return True if URL responds at all, whatever the status code.

    Malformed URLs and servers that do not speak HTTP count as unreachable.
    """
    try:
        req = urllib.request.Request(url, method="GET")
        with urllib.request.urlopen(req, timeout=timeout_seconds):
            return True
    except urllib.error.HTTPError:
        return True
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError):
        return False


def run(config: type[Config] = Config) -> RunSummary:
    """Capture every discovered template once, strictly in order.

    Raises:
        ValueError: If the configuration is invalid
        OSError: If the templates root cannot be listed
        WebDriverException: If the browser cannot be launched
    """
    errors = config.validate()
    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))

    config.ensure_directories()
    output_dir = config.SCREENSHOTS_DIR

    template_dirs = discover_template_dirs(config.TEMPLATES_ROOT)
    logger.info("Found %d templates to screenshot", len(template_dirs))

    if not is_url_reachable(config.BASE_URL):
        logger.warning("%s is not responding; captures will likely fail", config.BASE_URL)

    summary = RunSummary()
    with launch_browser(config) as driver:
        for template_dir in template_dirs:
            url = resolve_url(config.BASE_URL, template_dir)
            summary.add(capture_template(driver, template_dir, url, output_dir, config))

    logger.info(
        "Captured %d of %d templates into %s",
        len(summary.completed),
        len(summary.results),
        output_dir,
    )
    for result in summary.failed:
        logger.warning("Failed: %s (%s)", result.template, result.error)

    logger.info("All screenshots completed!")
    return summary


def main() -> int:
    config = Config
    configure_logging(config.LOG_LEVEL)

    try:
        run(config)
    except Exception:
        logger.exception("Fatal error")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
