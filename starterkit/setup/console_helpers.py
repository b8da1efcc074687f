"""console_helpers.py — Rich and Questionary integration for the terminal UI.

This module is the single place where the Rich consoles and the Questionary
module are bound. Other modules print through ``rprint``/``eprint`` and reach
prompts through ``console_helpers.questionary`` so tests can monkeypatch one
attribute instead of several imports.

Features
--------
- ``rprint`` prints Rich markup to stdout, ``eprint`` to stderr.
- Both consoles use soft wrapping so long messages are never re-flowed.
- Re-exports the Rich primitives used by the UI modules.

References
----------
- Rich Docs: https://rich.readthedocs.io/en/latest/
- Questionary Docs: https://github.com/tmbo/questionary

"""

from __future__ import annotations

from typing import Any

import questionary
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

_RICH_CONSOLE: Console = Console(soft_wrap=True)
_RICH_ERR_CONSOLE: Console = Console(stderr=True, soft_wrap=True)


def rprint(*objects: Any, **kwargs: Any) -> None:
    r"""Print objects with Rich markup to standard output.

    Parameters
    ----------
    *objects : Any
        Strings with Rich markup or Rich renderables.
    **kwargs : Any
        Forwarded to :meth:`rich.console.Console.print`.

    Examples
    --------
    >>> rprint("[green]done[/green]")
    done
    """
    _RICH_CONSOLE.print(*objects, **kwargs)


def eprint(*objects: Any, **kwargs: Any) -> None:
    """Print objects with Rich markup to standard error."""
    _RICH_ERR_CONSOLE.print(*objects, **kwargs)


__all__ = [
    "_RICH_CONSOLE",
    "_RICH_ERR_CONSOLE",
    "Panel",
    "Rule",
    "Table",
    "eprint",
    "escape",
    "questionary",
    "rprint",
]
