"""Rendering helpers for setup step status.

Provides localized status labels and a Rich table summarising which setup
steps ran, failed or were skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from starterkit.setup.console_helpers import Table

WAITING = "waiting"
RUNNING = "running"
OK = "ok"
FAIL = "fail"
SKIPPED = "skipped"


def _status_label(lang: str, base: str) -> str:
    """Return a localized status label for a given step status key.

    Parameters
    ----------
    lang : str
        Language code (``'en'`` or ``'sv'``).
    base : str
        Status key such as ``'waiting'``, ``'running'``, ``'ok'``, ``'fail'``
        or ``'skipped'``.

    Returns
    -------
    str
        Localized status label; unknown keys are returned unchanged.

    Examples
    --------
    >>> _status_label("sv", "ok")
    '✅ Klart'
    """
    if lang == "sv":
        labels = {
            WAITING: "⏳ Väntar",
            RUNNING: "▶️  Körs",
            OK: "✅ Klart",
            FAIL: "❌ Misslyckades",
            SKIPPED: "⏭  Hoppades över",
        }
    else:
        labels = {
            WAITING: "⏳ Waiting",
            RUNNING: "▶️  Running",
            OK: "✅ Done",
            FAIL: "❌ Failed",
            SKIPPED: "⏭  Skipped",
        }
    return labels.get(base, base)


def _render_steps_table(
    translate: Callable[[str], str],
    lang: str,
    steps: Iterable[tuple[str, str]],
) -> Table:
    """Construct a table summarising setup step status.

    Parameters
    ----------
    translate : Callable[[str], str]
        Translation function for i18n keys.
    lang : str
        Language used for the status labels.
    steps : iterable of (step_key, status) pairs
        Step i18n keys with their status key, in execution order.

    Returns
    -------
    rich.table.Table
        The table, ready to be printed.
    """
    table = Table(
        title=translate("steps_title"),
        show_header=True,
        header_style="bold blue",
    )
    table.add_column(translate("step_column"), style="bold")
    table.add_column(translate("status_column"))
    for step_key, status in steps:
        table.add_row(translate(step_key), _status_label(lang, status))
    return table


__all__ = [
    "FAIL",
    "OK",
    "RUNNING",
    "SKIPPED",
    "WAITING",
    "_render_steps_table",
    "_status_label",
]
