"""Prompt interaction helpers for the interactive setup.

On an interactive terminal the prompts are rendered by Questionary
(``console_helpers.questionary``). Questionary returns ``None`` when the user
presses Ctrl-C, which is turned into ``PromptCancelledError``.

Without a TTY (piped input, CI) the helpers fall back to plain line input.
That fallback re-asks on an invalid answer, but never more than
``INTERACTIVE_MAX_INVALID_ATTEMPTS`` times, and treats end of input as a
cancellation.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence

from starterkit.config import INTERACTIVE_MAX_INVALID_ATTEMPTS
from starterkit.exceptions import PromptCancelledError, UserInputError
from starterkit.setup import console_helpers as ch
from starterkit.setup.i18n import translate
from starterkit.setup.ui.basic import ui_warning

logger = logging.getLogger(__name__)

Validator = Callable[[str], bool | str]


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _cancelled(prompt: str) -> PromptCancelledError:
    return PromptCancelledError(
        translate("prompt_cancelled"), context={"prompt": prompt}
    )


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        raise _cancelled(prompt) from None


def ask_text(
    prompt: str,
    default: str | None = None,
    validate: Validator | None = None,
) -> str:
    r"""Prompt the user for a line of text.

    Parameters
    ----------
    prompt : str
        The user-facing question.
    default : str or None, optional
        Pre-filled answer; returned when the user just presses enter.
    validate : callable, optional
        Returns ``True`` for an acceptable answer or an error message. An
        error message is shown and the question is asked again.

    Returns
    -------
    str
        The accepted answer, stripped of surrounding whitespace.

    Raises
    ------
    PromptCancelledError
        If the user aborts the prompt or input ends.
    UserInputError
        If the line-input fallback receives too many invalid answers.
    """
    if _stdin_is_tty():
        answer = ch.questionary.text(
            prompt, default=default or "", validate=validate
        ).ask()
        if answer is None:
            raise _cancelled(prompt)
        return answer.strip()

    suffix = f" ({default})" if default else ""
    for _attempt in range(INTERACTIVE_MAX_INVALID_ATTEMPTS):
        value = _read_line(f"{prompt}{suffix} ").strip() or (default or "")
        verdict = True if validate is None else validate(value)
        if verdict is True:
            return value
        ui_warning(str(verdict))
        logger.debug("Rejected answer %r for prompt %r", value, prompt)
    raise UserInputError(translate("too_many_attempts"), context={"prompt": prompt})


def ask_select(
    prompt: str, choices: Sequence[str], default: str | None = None
) -> str:
    r"""Prompt the user to pick exactly one of ``choices``.

    Parameters
    ----------
    prompt : str
        The question describing the choices.
    choices : sequence of str
        The only answers that can be returned.
    default : str or None, optional
        Choice highlighted first (or picked on an empty line in the fallback).

    Returns
    -------
    str
        One element of ``choices``.

    Raises
    ------
    PromptCancelledError
        If the user aborts the prompt or input ends.
    UserInputError
        If the line-input fallback receives too many invalid answers.
    """
    options = list(choices)
    if _stdin_is_tty():
        answer = ch.questionary.select(prompt, choices=options, default=default).ask()
        if answer is None:
            raise _cancelled(prompt)
        return str(answer)

    ch.rprint(ch.escape(prompt))
    for idx, option in enumerate(options, start=1):
        ch.rprint(f"  {idx}. {ch.escape(option)}")
    for _attempt in range(INTERACTIVE_MAX_INVALID_ATTEMPTS):
        raw = _read_line("> ").strip()
        if not raw and default in options:
            return str(default)
        if raw in options:
            return raw
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        ui_warning(translate("invalid_choice", choices=", ".join(options)))
    raise UserInputError(translate("too_many_attempts"), context={"prompt": prompt})


__all__ = ["ask_select", "ask_text"]
