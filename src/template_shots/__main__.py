"""Entry point for running the template_shots package as a module."""

from __future__ import annotations

from template_shots.runner import main

if __name__ == "__main__":
    raise SystemExit(main())
