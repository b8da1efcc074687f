"""Dependency installer: one install command per package manager.

Dependency resolution is left entirely to the external tool. Unknown package
managers are rejected with ``UserInputError`` before anything runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from starterkit.models import PackageManager
from starterkit.setup.i18n import translate
from starterkit.setup.ui.basic import ui_info, ui_status

if TYPE_CHECKING:
    from starterkit.setup.commands import CommandRunner

logger = logging.getLogger(__name__)

INSTALL_COMMANDS: dict[PackageManager, tuple[str, ...]] = {
    PackageManager.YARN: ("yarn",),
    PackageManager.PNPM: ("pnpm", "install"),
    PackageManager.NPM: ("npm", "install"),
}


def install_command(package_manager: PackageManager | str) -> list[str]:
    """Return the argv that installs dependencies with ``package_manager``.

    Examples
    --------
    >>> install_command("yarn")
    ['yarn']
    >>> install_command(PackageManager.PNPM)
    ['pnpm', 'install']
    """
    return list(INSTALL_COMMANDS[PackageManager.parse(package_manager)])


def install_dependencies(
    package_manager: PackageManager | str, cwd: Path, runner: CommandRunner
) -> None:
    r"""Install the project's dependencies inside ``cwd``.

    Parameters
    ----------
    package_manager : PackageManager or str
        One of ``yarn``, ``pnpm`` or ``npm``.
    cwd : Path
        The project directory; used as the working directory of the command.
    runner : CommandRunner
        Runs the install command.

    Raises
    ------
    UserInputError
        If ``package_manager`` is not supported.
    ExternalCommandError
        If the install command cannot be started or fails.
    """
    argv = install_command(package_manager)
    logger.info("Installing dependencies with %s in %s", argv[0], cwd)
    with ui_status(translate("installing")):
        runner.run(argv, cwd=cwd)
    ui_info(translate("installed"))


__all__ = ["INSTALL_COMMANDS", "install_command", "install_dependencies"]
