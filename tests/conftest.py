"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from unittest import mock
from unittest.mock import Mock

import pytest

from template_shots.config import Config


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """Provide a project root with a mix of template and non-template entries."""
    root = tmp_path / "site"
    root.mkdir()
    for name in ["10-gallery", "2-blog", "05-foo", "41-metronic-one-page"]:
        (root / name).mkdir()
    (root / "node_modules").mkdir()
    (root / "scripts").mkdir()
    (root / "7-readme.txt").write_text("not a directory")
    return root


@pytest.fixture
def screenshots_dir(tmp_path: Path) -> Path:
    """Provide an output directory path that does not exist yet."""
    return tmp_path / "site" / "screenshots"


@pytest.fixture
def test_config(templates_root: Path, screenshots_dir: Path):
    """Patch Config for a fast run against the temporary project root."""
    with (
        mock.patch.object(Config, "BASE_URL", "http://x"),
        mock.patch.object(Config, "TEMPLATES_ROOT", templates_root),
        mock.patch.object(Config, "SCREENSHOTS_DIR", screenshots_dir),
        mock.patch.object(Config, "WAIT_TIME_SECONDS", 0),
        mock.patch.object(Config, "NETWORK_IDLE_WINDOW_SECONDS", 0),
        mock.patch.object(Config, "NETWORK_IDLE_POLL_SECONDS", 0.01),
    ):
        yield Config


# ============================================================================
# WebDriver Fixtures
# ============================================================================

def write_png(path: str) -> bool:
    """Stand-in for WebDriver.save_screenshot."""
    Path(path).write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return True


@pytest.fixture
def mock_driver():
    """Mock Chrome WebDriver that switches tabs and writes fake PNGs."""
    driver = Mock()
    driver.current_window_handle = "main"

    def new_window(kind):
        driver.current_window_handle = "tab"

    def switch_to_window(handle):
        driver.current_window_handle = handle

    driver.switch_to.new_window.side_effect = new_window
    driver.switch_to.window.side_effect = switch_to_window
    driver.get_log.return_value = []
    driver.save_screenshot.side_effect = write_png
    return driver


def _perf_entry(method: str, request_id: str | None = "1") -> dict[str, str]:
    """Build a Chrome performance log entry."""
    params = {} if request_id is None else {"requestId": request_id}
    return {"message": json.dumps({"message": {"method": method, "params": params}})}


@pytest.fixture
def perf_entry():
    """Factory for Chrome performance log entries."""
    return _perf_entry
