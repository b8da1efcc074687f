"""Project directory creation.

Creating the directory is the first side effect of a run and the one that
makes a second identical run fail: an existing directory is never merged
into or overwritten.
"""

from __future__ import annotations

import logging
from pathlib import Path

from starterkit.exceptions import ProjectDirectoryError, ProjectExistsError
from starterkit.setup.i18n import translate
from starterkit.setup.ui.basic import ui_info

logger = logging.getLogger(__name__)


def create_project_directory(project_path: Path, project_name: str) -> Path:
    r"""Create the directory ``project_path`` for a new project.

    Parameters
    ----------
    project_path : Path
        Target directory, ``cwd / project_name``.
    project_name : str
        Name shown in messages.

    Returns
    -------
    Path
        The created directory.

    Raises
    ------
    ProjectExistsError
        If anything already exists at ``project_path``.
    ProjectDirectoryError
        For any other filesystem error (permissions, missing parent, ...).
    """
    try:
        project_path.mkdir()
    except FileExistsError as exc:
        raise ProjectExistsError(
            translate("directory_exists", name=project_name),
            context={"path": str(project_path)},
        ) from exc
    except OSError as exc:
        raise ProjectDirectoryError(
            translate("directory_failed", name=project_name, error=exc.strerror or exc),
            context={"path": str(project_path), "errno": exc.errno},
        ) from exc
    logger.debug("Created %s", project_path)
    ui_info(translate("directory_created", name=project_name))
    return project_path


__all__ = ["create_project_directory"]
