"""Filesystem utilities to validate and safely remove version-control metadata.

The only tree the CLI ever deletes is the ``.git`` directory of the project
it has just cloned. These helpers make that explicit: a path is first stamped
by ``create_safe_path`` and only a stamped path is removed by
``safe_rmtree``.

Functions
---------
- ``create_safe_path``: Validate and stamp a path as safe for removal.
- ``safe_rmtree``: Remove a validated directory tree.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Any, NewType

from starterkit.config import VCS_METADATA_DIRNAME

logger = logging.getLogger(__name__)

# NewType used as a static "seal" to indicate the path is validated for removal.
_ValidatedPath = NewType("_ValidatedPath", Path)


def create_safe_path(path_to_validate: Path, project_root: Path) -> _ValidatedPath:
    r"""Validate and stamp a Path as safe for destructive operations.

    Safety checks:
    - Never allows deletion of ``project_root`` itself.
    - The path must be the version-control metadata directory sitting
      directly inside ``project_root``.

    Parameters
    ----------
    path_to_validate : Path
        The directory path to be validated for safe removal.
    project_root : Path
        The freshly cloned project directory.

    Returns
    -------
    _ValidatedPath
        The resolved path, stamped for safe usage by removal helpers.

    Raises
    ------
    PermissionError
        If the path is the project root or anything other than its ``.git``.

    Examples
    --------
    >>> from pathlib import Path
    >>> root = Path("/tmp/demo")
    >>> create_safe_path(root / ".git", root).name
    '.git'
    >>> create_safe_path(root, root)  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    PermissionError: SECURITY STOP: Attempt to delete the project root was blocked.
    """
    root = Path(project_root).resolve()
    target_path = Path(path_to_validate).resolve()

    if target_path == root:
        raise PermissionError(
            "SECURITY STOP: Attempt to delete the project root was blocked."
        )
    if target_path != root / VCS_METADATA_DIRNAME:
        raise PermissionError(
            f"SECURITY STOP: Path '{target_path}' is not the "
            f"{VCS_METADATA_DIRNAME} directory of '{root}'."
        )
    return _ValidatedPath(target_path)


def _clear_readonly_and_retry(func: Any, path: str, _exc: Any) -> None:
    # git marks pack and object files read-only; Windows refuses to unlink them.
    os.chmod(path, stat.S_IWRITE)
    func(path)


def safe_rmtree(safe_path: _ValidatedPath | Path, project_root: Path) -> None:
    r"""Remove a directory tree for a validated path.

    Parameters
    ----------
    safe_path : Path or _ValidatedPath
        The target directory (stamped or raw Path; validation always runs).
    project_root : Path
        The project directory ``safe_path`` must belong to.

    Raises
    ------
    PermissionError
        If the supplied path fails validation by ``create_safe_path``.
    OSError
        If the tree cannot be removed.

    Notes
    -----
    If the path does not exist, the function is a no-op.
    """
    validated = create_safe_path(Path(safe_path), project_root)
    if not validated.exists():
        logger.info("Path '%s' does not exist; nothing to remove.", validated)
        return
    logger.debug("Performing safe rmtree on: %s", validated)
    if sys.version_info >= (3, 12):
        shutil.rmtree(validated, onexc=_clear_readonly_and_retry)
    else:
        shutil.rmtree(validated, onerror=_clear_readonly_and_retry)
    logger.info("Removed directory: %s", validated)


__all__ = ["create_safe_path", "safe_rmtree"]
