"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses raised by the setup flow: environment checks, user
input, prompt cancellation, project directory creation and external
commands. Every fatal error reaches the top-level handler in
``starterkit.setup.app_runner`` as an ``AppError`` and ends the process with
exit code 1.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'FILESYSTEM_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    >>> str(e)
    'CODE: message'
    """

    __slots__ = ("code", "message", "context")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
        }


class EnvironmentValidationError(AppError):
    """Raised when the installed Node.js is missing or too old."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("ENVIRONMENT_ERROR", message, context=context)


class UserInputError(AppError):
    """Raised when user input is invalid or exceeds attempt limits."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("USER_INPUT_ERROR", message, context=context)


class PromptCancelledError(AppError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("PROMPT_CANCELLED", message, context=context)


class ProjectDirectoryError(AppError):
    """Raised when the project directory cannot be created."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        code: str = "FILESYSTEM_ERROR",
    ) -> None:
        super().__init__(code, message, context=context)


class ProjectExistsError(ProjectDirectoryError):
    """Raised when the project directory is already taken."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(message, context=context, code="PROJECT_EXISTS")


class ExternalCommandError(AppError):
    """Raised when a clone, install or cleanup step fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("EXTERNAL_COMMAND_ERROR", message, context=context)
