"""Minimal UI output primitives for the setup terminal interface.

Every progress line the CLI prints goes through this module so that it
carries the same blue ``expressjs-cli`` prefix followed by a coloured
message. Errors go to standard error, everything else to standard output.
Dynamic text is escaped before it is wrapped in Rich markup, so command
output containing square brackets is printed verbatim.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

from starterkit.config import LOG_PREFIX
from starterkit.setup.console_helpers import (
    _RICH_CONSOLE,
    Panel,
    Rule,
    eprint,
    escape,
    rprint,
)


def _prefixed(message: str, style: str) -> str:
    """Return ``message`` as Rich markup behind the CLI prefix.

    Examples
    --------
    >>> _prefixed("ok", "green")
    '[blue]expressjs-cli[/blue] [green]ok[/green]'
    """
    return f"[blue]{LOG_PREFIX}[/blue] [{style}]{escape(message)}[/{style}]"


def ui_rule(title: str) -> None:
    """Render a horizontal rule with ``title`` as caption."""
    rprint(Rule(escape(title), style="bold blue"))


def ui_header(title: str) -> None:
    r"""Render a prominent banner.

    Parameters
    ----------
    title : str
        Banner text to display.

    Examples
    --------
    >>> ui_header("Create Express.js Starterkit")  # doctest: +SKIP
    """
    rprint(Panel.fit(escape(title), style="bold white on blue", border_style="blue"))


def ui_status(message: str) -> AbstractContextManager[None]:
    r"""Provide a context manager showing a spinner while work is running.

    The spinner is only drawn on an interactive terminal; otherwise the
    message is printed once with the CLI prefix.

    Parameters
    ----------
    message : str
        Status text shown for the duration of the context.

    Returns
    -------
    ctx : AbstractContextManager[None]
        Context manager yielding control while the status is active.

    Examples
    --------
    >>> with ui_status("Cloning repository..."):
    ...     pass
    expressjs-cli Cloning repository...
    """

    @contextmanager
    def _ctx() -> Iterator[None]:
        if _RICH_CONSOLE.is_terminal:
            with _RICH_CONSOLE.status(_prefixed(message, "green"), spinner="dots"):
                yield
        else:
            rprint(_prefixed(message, "green"))
            yield

    return _ctx()


def ui_info(message: str, style: str = "green") -> None:
    """Print an informational line; green unless another style is given."""
    rprint(_prefixed(message, style))


def ui_hint(message: str) -> None:
    """Print usage guidance in cyan."""
    rprint(_prefixed(message, "cyan"))


def ui_success(message: str) -> None:
    """Print a success line with a check mark."""
    rprint(_prefixed(f"✓ {message}", "bold green"))


def ui_warning(message: str) -> None:
    """Print a non-fatal advisory in yellow."""
    rprint(_prefixed(message, "yellow"))


def ui_error(message: str) -> None:
    r"""Print an error line in red on standard error.

    Parameters
    ----------
    message : str
        Error text. Multi-line messages keep their line breaks.
    """
    eprint(_prefixed(message, "red"))


__all__ = [
    "ui_error",
    "ui_header",
    "ui_hint",
    "ui_info",
    "ui_rule",
    "ui_status",
    "ui_success",
    "ui_warning",
]
