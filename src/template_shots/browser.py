"""Headless Chrome lifecycle and page helpers built on Selenium WebDriver."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from selenium import webdriver
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.support.ui import WebDriverWait

from .config import BROWSER_ARGUMENTS, Config

logger = logging.getLogger(__name__)

# CDP events that open and settle a network request
REQUEST_STARTED = "Network.requestWillBeSent"
REQUEST_SETTLED = ("Network.loadingFinished", "Network.loadingFailed")


def build_webdriver(config: type[Config] = Config) -> webdriver.Chrome:
    """Create a headless Chrome WebDriver.

    Selenium Manager (bundled with Selenium 4.6+) resolves ChromeDriver automatically.
    Performance logging is enabled so network activity can be observed.
    """
    options = webdriver.ChromeOptions()
    for argument in BROWSER_ARGUMENTS:
        options.add_argument(argument)
    options.add_argument(f"--window-size={config.VIEWPORT_WIDTH},{config.VIEWPORT_HEIGHT}")
    options.set_capability("goog:loggingPrefs", {"performance": "ALL"})

    driver = webdriver.Chrome(options=options)
    driver.set_page_load_timeout(config.NAVIGATION_TIMEOUT_SECONDS)
    return driver


@contextmanager
def launch_browser(config: type[Config] = Config) -> Iterator[Any]:
    """Launch one browser for the whole run and always quit it afterwards."""
    logger.info("Launching headless Chrome")
    driver = build_webdriver(config)
    try:
        yield driver
    finally:
        logger.info("Closing browser")
        driver.quit()


@contextmanager
def open_tab(driver: Any) -> Iterator[str]:
    """Open a fresh tab, switch to it, and close it again on exit.

    Failing to close the tab is logged rather than raised so the caller's
    outcome is preserved.
    """
    original_handle = driver.current_window_handle
    driver.switch_to.new_window("tab")
    tab_handle = driver.current_window_handle
    try:
        yield tab_handle
    finally:
        try:
            driver.close()
            driver.switch_to.window(original_handle)
        except Exception as exc:
            logger.warning("Could not close tab %s: %s", tab_handle, getattr(exc, "msg", None) or exc)


def set_viewport(driver: Any, width: int, height: int) -> None:
    """Pin the page viewport to a fixed size."""
    driver.execute_cdp_cmd(
        "Emulation.setDeviceMetricsOverride",
        {
            "mobile": False,
            "width": width,
            "height": height,
            "deviceScaleFactor": 1,
        },
    )


class NetworkIdleCondition:
    """Wait condition that holds once few enough requests stay in flight.

    Reads Chrome performance log entries on every poll and tracks request ids
    between ``Network.requestWillBeSent`` and ``Network.loadingFinished`` /
    ``Network.loadingFailed``. The condition is met when at most
    ``max_connections`` requests have been pending for ``quiet_seconds``.
    """

    def __init__(
        self,
        max_connections: int,
        quiet_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_connections = max_connections
        self.quiet_seconds = quiet_seconds
        self.clock = clock
        self.in_flight: set[str] = set()
        self._idle_since: float | None = None

    def feed(self, entries: list[dict[str, Any]]) -> None:
        """Update in-flight requests from raw performance log entries."""
        for entry in entries:
            try:
                message = json.loads(entry["message"])["message"]
            except (KeyError, TypeError, ValueError):
                continue

            method = message.get("method")
            request_id = message.get("params", {}).get("requestId")
            if request_id is None:
                continue

            if method == REQUEST_STARTED:
                self.in_flight.add(request_id)
            elif method in REQUEST_SETTLED:
                self.in_flight.discard(request_id)

    def __call__(self, driver: Any) -> bool:
        self.feed(driver.get_log("performance"))
        now = self.clock()

        if len(self.in_flight) > self.max_connections:
            self._idle_since = None
            return False

        if self._idle_since is None:
            self._idle_since = now
        return now - self._idle_since >= self.quiet_seconds


def navigate(driver: Any, url: str, config: type[Config] = Config) -> None:
    """Load url and wait for the network to go quiet.

    Page load and the network-idle wait share one deadline of
    ``config.NAVIGATION_TIMEOUT_SECONDS``.

    Raises:
        TimeoutException: If the page does not settle before the deadline
    """
    deadline = time.monotonic() + config.NAVIGATION_TIMEOUT_SECONDS

    # Drop events recorded before this navigation
    driver.get_log("performance")
    driver.get(url)

    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise TimeoutException(f"Navigation to {url} exceeded {config.NAVIGATION_TIMEOUT_SECONDS}s")

    condition = NetworkIdleCondition(
        config.NETWORK_IDLE_MAX_CONNECTIONS, config.NETWORK_IDLE_WINDOW_SECONDS
    )
    WebDriverWait(driver, remaining, poll_frequency=config.NETWORK_IDLE_POLL_SECONDS).until(
        condition,
        message=f"Network did not go idle for {url} within {config.NAVIGATION_TIMEOUT_SECONDS}s",
    )


def save_viewport_screenshot(driver: Any, output_path: Path) -> None:
    """Save the visible viewport as a PNG, replacing any existing file."""
    ok = driver.save_screenshot(str(output_path))
    if not ok:
        raise RuntimeError(f"Failed to save screenshot: {output_path}")
