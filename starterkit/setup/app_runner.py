"""Entrypoint and top-level error handling for the setup application.

This module parses the command line, configures logging, and runs the
linear setup flow::

    validate environment -> prompt -> create directory -> clone -> install -> cleanup

Every fatal error ends up in the single handler in :func:`run`, which prints
it with the CLI prefix and turns it into exit code 1.

Examples
--------
>>> from starterkit.setup import app_runner
>>> args = app_runner.parse_cli_args(["my-app", "--lang", "en"])
>>> args.project_name
'my-app'
>>> app_runner.entry_point(["my-app"])  # doctest: +SKIP

"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from starterkit import __version__
from starterkit.config import (
    CLI_NAME,
    DEFAULT_LOG_LEVEL,
    EXIT_FAILURE,
    EXIT_OK,
    LOG_FORMAT,
    ORIGIN_ENV_VAR,
    ORIGIN_GIT_REPO,
)
from starterkit.exceptions import AppError
from starterkit.setup import app_prompts, environment, i18n
from starterkit.setup.commands import ScaffoldTooling, ShellTooling, SubprocessRunner
from starterkit.setup.i18n import translate
from starterkit.setup.pipeline import orchestrator
from starterkit.setup.ui.basic import ui_error, ui_header

logger = logging.getLogger(__name__)


def configure_logging(
    log_level: str = DEFAULT_LOG_LEVEL, log_file: Path | None = None
) -> None:
    r"""Configure logging for a CLI run.

    Removes existing root handlers, then installs a stderr stream handler
    and, when ``log_file`` is given, a file handler. Both use ``LOG_FORMAT``.

    Parameters
    ----------
    log_level : str, optional
        The logging level name (e.g., "INFO", "DEBUG"). Unknown names fall
        back to WARNING.
    log_file : Path or None, optional
        Append log records to this file as well.

    Raises
    ------
    OSError
        If ``log_file`` cannot be opened. Root handlers are left untouched.

    Examples
    --------
    >>> configure_logging(log_level="DEBUG")
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    r"""Parse command-line arguments.

    Parameters
    ----------
    argv : list of str or None, optional
        Arguments to parse (as from ``sys.argv[1:]``). If None, the real
        command line is used.

    Returns
    -------
    argparse.Namespace
        Fields ``project_name``, ``lang``, ``log_level`` and ``log_file``.

    Examples
    --------
    >>> ns = parse_cli_args(["demo", "--lang", "sv"])
    >>> ns.project_name, ns.lang
    ('demo', 'sv')
    """
    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description="Generate a new project from an Express.js starter kit.",
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Suggested project name (offered as the default answer)",
    )
    parser.add_argument("--lang", choices=sorted(i18n.TEXTS), default="en")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def run(
    args: argparse.Namespace,
    *,
    cwd: Path | None = None,
    tooling: ScaffoldTooling | None = None,
    node_version: str | None = None,
) -> int:
    r"""Run the interactive setup and return the process exit code.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments (see :func:`parse_cli_args`).
    cwd : Path or None, optional
        Parent directory of the new project; defaults to the current one.
    tooling : ScaffoldTooling or None, optional
        Clone/install/cleanup capability; defaults to ``ShellTooling``.
    node_version : str or None, optional
        Skip detection and validate this Node.js version instead.

    Returns
    -------
    int
        ``EXIT_OK`` when the project is ready, ``EXIT_FAILURE`` otherwise.
    """
    i18n.set_language(getattr(args, "lang", None))
    workdir = Path(cwd) if cwd is not None else Path.cwd()
    runner = SubprocessRunner()
    tooling = tooling or ShellTooling(runner)
    origin = os.environ.get(ORIGIN_ENV_VAR) or ORIGIN_GIT_REPO

    try:
        ui_header(translate("welcome"))
        context = environment.build_invocation_context(
            args.project_name, workdir, runner, node_version=node_version
        )
        selection = app_prompts.collect_user_selection(context.project_name_arg)
        orchestrator.run_setup(selection, context.cwd, tooling, origin=origin)
    except AppError as exc:
        logger.debug("Setup failed: %s", exc.to_dict())
        ui_error(exc.message)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        ui_error(translate("interrupted"))
        return EXIT_FAILURE
    return EXIT_OK


def entry_point(argv: list[str] | None = None) -> int:
    """Parse ``argv``, configure logging and run the setup."""
    args = parse_cli_args(argv)
    i18n.set_language(args.lang)
    try:
        configure_logging(args.log_level, args.log_file)
    except OSError as exc:
        ui_error(
            translate("log_file_failed", path=args.log_file, error=exc.strerror or exc)
        )
        return EXIT_FAILURE
    return run(args)


def main() -> None:
    """Console-script entry: exit with the code returned by ``entry_point``."""
    raise SystemExit(entry_point())


__all__ = ["configure_logging", "entry_point", "main", "parse_cli_args", "run"]
