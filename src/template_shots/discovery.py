"""Discovery of numbered template directories."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import TEMPLATE_DIR_PATTERN

logger = logging.getLogger(__name__)


def template_sort_key(name: str) -> int:
    """Return the numeric prefix of a template directory name."""
    return int(name.split("-", 1)[0])


def discover_template_dirs(root: Path) -> list[str]:
    """List template directories under root, ordered by numeric prefix.

    Only immediate subdirectories whose names look like ``<digits>-<label>``
    are returned. Files, symlinks and other directories are skipped.

    Args:
        root: Directory holding the template directories

    Returns:
        Directory names sorted ascending by their leading number

    Raises:
        OSError: If root cannot be listed
    """
    names = [
        entry.name
        for entry in Path(root).iterdir()
        if entry.is_dir() and not entry.is_symlink() and TEMPLATE_DIR_PATTERN.match(entry.name)
    ]
    names.sort(key=template_sort_key)

    logger.debug("Discovered %d template directories in %s", len(names), root)
    return names
