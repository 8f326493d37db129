"""Resolution of template directory names to entry URLs."""

from __future__ import annotations

from .config import URL_OVERRIDES


def resolve_url(
    base_url: str, template_dir: str, overrides: dict[str, str] | None = None
) -> str:
    """Build the URL a template should be captured from.

    Args:
        base_url: Root URL of the server hosting the templates
        template_dir: Template directory name, e.g. "05-foo"
        overrides: Entry point table; defaults to URL_OVERRIDES

    Returns:
        The override entry for template_dir if present, otherwise "<base>/<dir>/"
    """
    if overrides is None:
        overrides = URL_OVERRIDES

    root = f"{base_url.rstrip('/')}/{template_dir}/"
    override = overrides.get(template_dir)
    if override is None:
        return root
    if override.startswith(("http://", "https://")):
        return override
    return root + override.lstrip("/")
