"""Minimal runner for the scaffolding application.

This file is intentionally minimal: its single responsibility is to provide
a tiny entrypoint that delegates execution to ``starterkit.setup.app_runner``
when working from a source checkout.

Usage:
    python create_project.py [project-name] [--lang en|sv]

"""

from __future__ import annotations


def entry_point(argv: list[str] | None = None) -> int:
    """Run the scaffolding application and return its exit code.

    The import is performed inside the function to avoid importing the whole
    application at module import time.
    """
    from starterkit.setup.app_runner import entry_point as app_entry_point

    return app_entry_point(argv)


if __name__ == "__main__":
    raise SystemExit(entry_point())
