"""Injected process capability for the setup flow.

Two seams are defined here:

- ``CommandRunner`` runs one external command to completion in an explicit
  working directory. ``SubprocessRunner`` is the real implementation.
- ``ScaffoldTooling`` groups the three side-effecting setup operations
  (clone, install, remove version-control metadata). ``ShellTooling``
  implements them on top of a ``CommandRunner``.

Tests substitute either seam with a fake so no network or process is needed.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from starterkit.config import CLONE_DEPTH, VCS_METADATA_DIRNAME
from starterkit.exceptions import ExternalCommandError
from starterkit.models import PackageManager
from starterkit.setup import installer
from starterkit.setup.fs_utils import create_safe_path, safe_rmtree
from starterkit.setup.i18n import translate

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Runs an external command and blocks until it exits."""

    @abstractmethod
    def run(self, argv: Sequence[str], cwd: Path) -> str:
        """Run ``argv`` inside ``cwd`` and return its standard output.

        Raises ``ExternalCommandError`` when the command cannot be started or
        exits with a non-zero status.
        """


def _resolve_argv(argv: Sequence[str]) -> list[str]:
    # shutil.which finds npm.cmd / yarn.cmd shims on Windows.
    resolved = list(argv)
    executable = shutil.which(resolved[0])
    if executable:
        resolved[0] = executable
    return resolved


class SubprocessRunner(CommandRunner):
    """``CommandRunner`` backed by :func:`subprocess.run`."""

    def run(self, argv: Sequence[str], cwd: Path) -> str:
        command = " ".join(argv)
        logger.debug("+ (%s) %s", cwd, command)
        try:
            completed = subprocess.run(
                _resolve_argv(argv),
                cwd=str(cwd),
                check=True,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            # The child reports a failed chdir with the directory as filename.
            if exc.filename is not None and str(exc.filename) == str(cwd):
                message = translate("cwd_unusable", cwd=cwd, error=exc.strerror or exc)
            elif isinstance(exc, FileNotFoundError):
                message = translate("command_not_found", command=argv[0])
            else:
                message = translate(
                    "command_not_runnable", command=argv[0], error=exc.strerror or exc
                )
            raise ExternalCommandError(
                message,
                context={"command": command, "cwd": str(cwd), "errno": exc.errno},
            ) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            message = translate("command_failed", command=command, code=exc.returncode)
            if detail:
                message = f"{message}\n{detail}"
            raise ExternalCommandError(
                message,
                context={
                    "command": command,
                    "cwd": str(cwd),
                    "returncode": exc.returncode,
                },
            ) from exc
        logger.debug("Command finished: %s", command)
        return completed.stdout or ""


class ScaffoldTooling(ABC):
    """The side-effecting operations the setup orchestrator sequences."""

    @abstractmethod
    def clone(self, url: str, destination: Path, cwd: Path) -> None:
        """Shallow-clone ``url`` into ``destination``."""

    @abstractmethod
    def install(self, package_manager: PackageManager, cwd: Path) -> None:
        """Install the dependencies of the project in ``cwd``."""

    @abstractmethod
    def remove_vcs_metadata(self, project_path: Path) -> None:
        """Delete the version-control metadata of ``project_path``."""


class ShellTooling(ScaffoldTooling):
    """Runs git and the package managers through a ``CommandRunner``."""

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self.runner = runner or SubprocessRunner()

    def clone(self, url: str, destination: Path, cwd: Path) -> None:
        self.runner.run(
            ["git", "clone", "--depth", str(CLONE_DEPTH), url, str(destination)],
            cwd=cwd,
        )

    def install(self, package_manager: PackageManager, cwd: Path) -> None:
        installer.install_dependencies(package_manager, cwd=cwd, runner=self.runner)

    def remove_vcs_metadata(self, project_path: Path) -> None:
        metadata = project_path / VCS_METADATA_DIRNAME
        try:
            safe_rmtree(create_safe_path(metadata, project_path), project_path)
        except OSError as exc:
            raise ExternalCommandError(
                translate("cleanup_failed", path=metadata, error=exc),
                context={"path": str(metadata)},
            ) from exc


__all__ = [
    "CommandRunner",
    "ScaffoldTooling",
    "ShellTooling",
    "SubprocessRunner",
]
