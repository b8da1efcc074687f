"""Closed enumerations and immutable value objects for a single run.

``Template`` and ``PackageManager`` are closed sets: parsing a value outside
them raises ``UserInputError`` instead of falling back to a default.
``InvocationContext`` and ``UserSelection`` are created once and never
mutated afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from starterkit.config import PROJECT_NAME_PATTERN
from starterkit.exceptions import UserInputError
from starterkit.setup.i18n import translate

_PROJECT_NAME_RE = re.compile(PROJECT_NAME_PATTERN)


def is_valid_project_name(name: str) -> bool:
    """Return True when ``name`` only uses letters, digits, ``_``, ``.`` and ``-``.

    Examples
    --------
    >>> is_valid_project_name("my-app_1.0")
    True
    >>> is_valid_project_name("my app")
    False
    """
    return bool(_PROJECT_NAME_RE.fullmatch(name or ""))


class _ClosedChoice(str, Enum):
    """String enum whose ``parse`` rejects unknown values."""

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: str | _ClosedChoice) -> _ClosedChoice:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise UserInputError(
                translate(
                    cls._unsupported_key(),
                    value=value,
                    choices=", ".join(cls.values()),
                ),
                context={"value": str(value), "choices": cls.values()},
            ) from None

    @classmethod
    def _unsupported_key(cls) -> str:
        return "unsupported_choice"


class Template(_ClosedChoice):
    """Starter-kit repositories that can be generated."""

    EXPRESS_API = "express-api"
    EXPRESS_API_TYPEORM = "express-api-typeorm"
    EXPRESS_API_SEQUELIZE = "express-api-sequelize"

    @classmethod
    def _unsupported_key(cls) -> str:
        return "unsupported_template"


class PackageManager(_ClosedChoice):
    """Package managers the generated project can be installed with."""

    YARN = "yarn"
    PNPM = "pnpm"
    NPM = "npm"

    @classmethod
    def _unsupported_key(cls) -> str:
        return "unsupported_package_manager"


@dataclass(frozen=True)
class InvocationContext:
    """What the process knew when it started.

    Attributes
    ----------
    project_name_arg:
        The optional positional argument. Only used as the default answer of
        the project name prompt.
    cwd:
        Directory the project is created in.
    node_version:
        Version string reported by ``node --version``.
    """

    project_name_arg: str | None
    cwd: Path
    node_version: str


@dataclass(frozen=True)
class UserSelection:
    """The three answers collected from the user."""

    template: Template
    project_name: str
    package_manager: PackageManager

    def __post_init__(self) -> None:
        object.__setattr__(self, "template", Template.parse(self.template))
        object.__setattr__(
            self, "package_manager", PackageManager.parse(self.package_manager)
        )
        if not is_valid_project_name(self.project_name):
            raise UserInputError(
                translate("invalid_project_name"),
                context={"project_name": self.project_name},
            )

    def project_path(self, cwd: Path) -> Path:
        """Return the directory the project is created in."""
        return Path(cwd) / self.project_name


__all__ = [
    "InvocationContext",
    "PackageManager",
    "Template",
    "UserSelection",
    "is_valid_project_name",
]
