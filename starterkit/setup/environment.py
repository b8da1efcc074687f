"""Environment checks run before any prompt is shown.

The generated starter kits are Node.js projects, so the runtime that matters
is the Node.js on ``PATH``: below ``MIN_NODE_VERSION`` the run stops, below
``RECOMMENDED_NODE_VERSION`` an advisory is printed and the run continues.
The positional project name is optional; when it is missing a short usage
hint is printed and the name is asked for interactively.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from starterkit.config import (
    CLI_NAME,
    MIN_NODE_VERSION,
    NODE_EXECUTABLE,
    RECOMMENDED_NODE_VERSION,
)
from starterkit.exceptions import EnvironmentValidationError, ExternalCommandError
from starterkit.models import InvocationContext
from starterkit.setup.commands import CommandRunner
from starterkit.setup.i18n import translate
from starterkit.setup.ui.basic import ui_hint, ui_warning

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)")


def parse_major_version(version: str) -> int:
    """Return the major component of a ``major.minor.patch`` version string.

    Examples
    --------
    >>> parse_major_version("v22.3.0")
    22
    >>> parse_major_version("20.11.1")
    20
    """
    match = _VERSION_RE.match((version or "").strip())
    if match is None:
        raise EnvironmentValidationError(
            translate("node_version_unparsable", version=version),
            context={"version": version},
        )
    return int(match.group(1))


def detect_node_version(runner: CommandRunner, cwd: Path) -> str:
    """Return the version reported by ``node --version`` without the ``v``."""
    try:
        output = runner.run([NODE_EXECUTABLE, "--version"], cwd=cwd)
    except ExternalCommandError as exc:
        raise EnvironmentValidationError(
            translate("node_not_found", minimum=MIN_NODE_VERSION),
            context=exc.context,
        ) from exc
    version = output.strip().lstrip("v")
    logger.debug("Detected Node.js %s", version)
    return version


def validate_node_version(version: str) -> bool:
    r"""Check ``version`` against the minimum and recommended majors.

    Parameters
    ----------
    version : str
        Version string in ``major.minor.patch`` form.

    Returns
    -------
    bool
        True when the version meets the recommendation, False when only the
        minimum is met (an advisory has been printed).

    Raises
    ------
    EnvironmentValidationError
        If the major version is below ``MIN_NODE_VERSION`` or unreadable.
    """
    major = parse_major_version(version)
    if major < MIN_NODE_VERSION:
        raise EnvironmentValidationError(
            translate("node_too_old", version=version, minimum=MIN_NODE_VERSION),
            context={"version": version, "minimum": MIN_NODE_VERSION},
        )
    if major < RECOMMENDED_NODE_VERSION:
        ui_warning(
            translate(
                "node_recommendation",
                recommended=RECOMMENDED_NODE_VERSION,
                version=version,
            )
        )
        return False
    return True


def validate_args(project_name_arg: str | None) -> bool:
    """Print usage guidance when no project name was passed; never exits."""
    if project_name_arg:
        return True
    ui_hint(translate("usage_missing_name"))
    ui_hint(translate("usage_example_intro"))
    ui_hint(translate("usage_example", cli=CLI_NAME))
    return False


def build_invocation_context(
    project_name_arg: str | None,
    cwd: Path,
    runner: CommandRunner,
    node_version: str | None = None,
) -> InvocationContext:
    """Validate the environment and capture it as an ``InvocationContext``."""
    version = node_version if node_version is not None else detect_node_version(runner, cwd)
    validate_node_version(version)
    validate_args(project_name_arg)
    return InvocationContext(
        project_name_arg=project_name_arg or None,
        cwd=Path(cwd),
        node_version=version,
    )


__all__ = [
    "build_invocation_context",
    "detect_node_version",
    "parse_major_version",
    "validate_args",
    "validate_node_version",
]
