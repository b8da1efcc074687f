"""Orchestrator for the setup sequence.

Runs the four setup steps as one unit of work:

1. create the project directory,
2. shallow-clone the chosen template into it,
3. install its dependencies with the chosen package manager,
4. remove the cloned ``.git`` directory.

The first failing step aborts the rest. Nothing is rolled back: a partially
cloned or partially installed project stays on disk. The project path is
handed to every step as an explicit working directory; the process never
changes its own working directory.

Typical usage::

    from starterkit.setup.pipeline import orchestrator
    orchestrator.run_setup(selection, Path.cwd(), ShellTooling())

"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from starterkit.config import ORIGIN_GIT_REPO
from starterkit.models import Template, UserSelection
from starterkit.setup import i18n
from starterkit.setup.commands import ScaffoldTooling
from starterkit.setup.console_helpers import rprint
from starterkit.setup.i18n import translate
from starterkit.setup.project import create_project_directory
from starterkit.setup.ui.basic import ui_info, ui_status, ui_success

from .status import FAIL, OK, RUNNING, SKIPPED, WAITING, _render_steps_table

logger = logging.getLogger(__name__)

STEPS: tuple[str, ...] = ("step_create", "step_clone", "step_install", "step_cleanup")


def repository_url(template: Template | str, origin: str = ORIGIN_GIT_REPO) -> str:
    """Return the clone URL of ``template`` under ``origin``.

    Examples
    --------
    >>> repository_url("express-api")
    'https://github.com/masb0ymas/express-api'
    """
    return f"{origin.rstrip('/')}/{Template.parse(template).value}"


class SetupProgress:
    """Status of every setup step, in execution order."""

    def __init__(self) -> None:
        self.statuses: dict[str, str] = {key: WAITING for key in STEPS}

    @contextmanager
    def step(self, key: str) -> Iterator[None]:
        """Mark ``key`` running; on error mark it failed and skip the rest."""
        self.statuses[key] = RUNNING
        try:
            yield
        except BaseException:
            self.statuses[key] = FAIL
            for other, status in self.statuses.items():
                if status == WAITING:
                    self.statuses[other] = SKIPPED
            raise
        self.statuses[key] = OK

    def rows(self) -> list[tuple[str, str]]:
        """Return ``(step_key, status)`` pairs in execution order."""
        return list(self.statuses.items())


def run_setup(
    selection: UserSelection,
    cwd: Path,
    tooling: ScaffoldTooling,
    origin: str = ORIGIN_GIT_REPO,
    progress: SetupProgress | None = None,
) -> Path:
    r"""Create, clone, install and clean up a new project.

    Parameters
    ----------
    selection : UserSelection
        Template, project name and package manager chosen by the user.
    cwd : Path
        Parent directory of the new project.
    tooling : ScaffoldTooling
        Performs the clone, install and cleanup operations.
    origin : str, optional
        Base URL the template repositories live under.
    progress : SetupProgress or None, optional
        Step tracker; a fresh one is used when omitted.

    Returns
    -------
    Path
        The project directory.

    Raises
    ------
    ProjectDirectoryError
        If the project directory exists or cannot be created. Nothing else
        runs in that case.
    ExternalCommandError
        If cloning, installing or cleaning up fails. Later steps are skipped.
    """
    progress = progress or SetupProgress()
    project_path = selection.project_path(cwd)
    url = repository_url(selection.template, origin)
    logger.info("Setting up %s from %s", project_path, url)

    try:
        with progress.step("step_create"):
            create_project_directory(project_path, selection.project_name)
        with progress.step("step_clone"):
            with ui_status(translate("cloning")):
                tooling.clone(url, project_path, cwd=Path(cwd))
        with progress.step("step_install"):
            tooling.install(selection.package_manager, cwd=project_path)
        with progress.step("step_cleanup"):
            ui_info(translate("cleaning"))
            tooling.remove_vcs_metadata(project_path)
    finally:
        rprint(_render_steps_table(translate, i18n.LANG, progress.rows()))

    ui_success(translate("done"))
    return project_path


__all__ = ["STEPS", "SetupProgress", "repository_url", "run_setup"]
