"""The three setup questions.

Asks, in order, for the template, the project name and the package manager,
and returns them as one immutable ``UserSelection``. Nothing is returned
until all three have been answered.
"""

from __future__ import annotations

from starterkit.models import (
    PackageManager,
    Template,
    UserSelection,
    is_valid_project_name,
)
from starterkit.setup.i18n import translate
from starterkit.setup.ui import prompts


def validate_project_name(value: str) -> bool | str:
    """Return True for a valid project name, else the message to show.

    Examples
    --------
    >>> validate_project_name("my-app_1.0")
    True
    """
    if is_valid_project_name(value):
        return True
    return translate("invalid_project_name")


def ask_template() -> Template:
    return Template.parse(
        prompts.ask_select(translate("prompt_template"), Template.values())
    )


def ask_project_name(default: str | None = None) -> str:
    return prompts.ask_text(
        translate("prompt_project_name"),
        default=default,
        validate=validate_project_name,
    )


def ask_package_manager() -> PackageManager:
    return PackageManager.parse(
        prompts.ask_select(translate("prompt_package_manager"), PackageManager.values())
    )


def collect_user_selection(default_project_name: str | None = None) -> UserSelection:
    r"""Ask the three setup questions.

    Parameters
    ----------
    default_project_name : str or None, optional
        Pre-filled answer of the project name question (the positional CLI
        argument, if any).

    Returns
    -------
    UserSelection
        The collected answers.

    Raises
    ------
    PromptCancelledError
        If any prompt is cancelled.
    UserInputError
        If an answer is outside its closed set.
    """
    template = ask_template()
    project_name = ask_project_name(default_project_name)
    package_manager = ask_package_manager()
    return UserSelection(
        template=template,
        project_name=project_name,
        package_manager=package_manager,
    )


__all__ = [
    "ask_package_manager",
    "ask_project_name",
    "ask_template",
    "collect_user_selection",
    "validate_project_name",
]
