"""Headless-browser screenshots of numbered template directories."""

from __future__ import annotations

from .capture import CaptureResult, RunSummary, capture_template
from .discovery import discover_template_dirs
from .runner import main, run
from .urls import resolve_url

__version__ = "0.1.0"

__all__ = [
    "CaptureResult",
    "RunSummary",
    "capture_template",
    "discover_template_dirs",
    "main",
    "resolve_url",
    "run",
]
