"""Per-template screenshot capture and run results."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any


from .browser import navigate, open_tab, save_viewport_screenshot, set_viewport
from .config import STATUS_COMPLETED, STATUS_FAILED, Config

logger = logging.getLogger(__name__)


class CaptureResult:
    """Outcome of capturing one template."""

    def __init__(
        self,
        template: str,
        url: str,
        status: str,
        output_path: Path | None = None,
        error: str | None = None,
        duration_seconds: float = 0.0,
    ) -> None:
        self.template = template
        self.url = url
        self.status = status
        self.output_path = output_path
        self.error = error
        self.duration_seconds = duration_seconds

    @property
    def ok(self) -> bool:
        return self.status == STATUS_COMPLETED

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a dictionary."""
        return {
            "template": self.template,
            "url": self.url,
            "status": self.status,
            "output_path": str(self.output_path) if self.output_path else None,
            "error": self.error,
            "duration_seconds": round(self.duration_seconds, 3),
        }

    def __repr__(self) -> str:
        return f"<CaptureResult {self.template} {self.status}>"


class RunSummary:
    """Ordered capture results for one run."""

    def __init__(self, results: list[CaptureResult] | None = None) -> None:
        self.results: list[CaptureResult] = list(results or [])

    def add(self, result: CaptureResult) -> None:
        self.results.append(result)

    @property
    def completed(self) -> list[CaptureResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> list[CaptureResult]:
        return [result for result in self.results if not result.ok]

    @property
    def ok(self) -> bool:
        """True when no capture failed."""
        return not self.failed

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": len(self.results),
            "completed": len(self.completed),
            "failed": len(self.failed),
            "results": [result.to_dict() for result in self.results],
        }


def screenshot_path(output_dir: Path, template_dir: str) -> Path:
    """Return the PNG path for a template."""
    return output_dir / f"{template_dir}.png"


def capture_template(
    driver: Any,
    template_dir: str,
    url: str,
    output_dir: Path,
    config: type[Config] = Config,
) -> CaptureResult:
    """Capture one template in its own tab.

    Any error, including a dropped chromedriver connection, is logged and
    returned as a failed result so the run can move on to the next template.
    The tab is closed on every path.

    Args:
        driver: Shared WebDriver
        template_dir: Template directory name
        url: Resolved entry URL
        output_dir: Directory receiving the PNG
        config: Configuration class

    Returns:
        CaptureResult describing the outcome
    """
    output_path = screenshot_path(output_dir, template_dir)
    started = time.monotonic()

    logger.info("Taking screenshot of %s", template_dir)
    logger.info("  URL: %s", url)

    try:
        with open_tab(driver):
            set_viewport(driver, config.VIEWPORT_WIDTH, config.VIEWPORT_HEIGHT)
            navigate(driver, url, config)

            logger.info("  Waiting %ss for rendering", config.WAIT_TIME_SECONDS)
            time.sleep(config.WAIT_TIME_SECONDS)

            save_viewport_screenshot(driver, output_path)
    except Exception as exc:
        message = getattr(exc, "msg", None) or str(exc)
        logger.error("  Error taking screenshot of %s: %s", template_dir, message)
        return CaptureResult(
            template=template_dir,
            url=url,
            status=STATUS_FAILED,
            error=message,
            duration_seconds=time.monotonic() - started,
        )

    logger.info("  Screenshot saved: %s", output_path)
    return CaptureResult(
        template=template_dir,
        url=url,
        status=STATUS_COMPLETED,
        output_path=output_path,
        duration_seconds=time.monotonic() - started,
    )
