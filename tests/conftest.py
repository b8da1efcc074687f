"""Pytest configuration for test environment setup.

- Ensures the project root is available on ``sys.path`` for imports.
- Resets the UI language after every test.
- Provides fake process runners and scaffold tooling so no test touches the
  network or spawns real processes.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from starterkit.exceptions import ExternalCommandError  # noqa: E402
from starterkit.setup import i18n  # noqa: E402
from starterkit.setup.commands import CommandRunner, ScaffoldTooling  # noqa: E402
from starterkit.setup.ui import prompts  # noqa: E402


class FakeRunner(CommandRunner):
    """Records every command; ``git clone`` creates the destination's ``.git``."""

    def __init__(self, outputs=None, fail_on=None):
        self.calls = []
        self.outputs = dict(outputs or {})
        self.fail_on = fail_on

    def run(self, argv, cwd):
        argv = list(argv)
        self.calls.append((argv, Path(cwd)))
        if self.fail_on is not None and argv[0] == self.fail_on:
            raise ExternalCommandError(
                f"Command '{' '.join(argv)}' failed with exit code 1.",
                context={"command": " ".join(argv), "returncode": 1},
            )
        if argv[:2] == ["git", "clone"]:
            destination = Path(argv[-1])
            (destination / ".git" / "objects").mkdir(parents=True)
            (destination / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
            (destination / "package.json").write_text('{"name": "starter"}\n')
        return self.outputs.get(argv[0], "")


class FakeTooling(ScaffoldTooling):
    """Scaffold tooling that only records what it was asked to do."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name == self.fail_on:
            raise ExternalCommandError(f"{name} failed", context={"step": name})

    def clone(self, url, destination, cwd):
        self._record("clone", url, Path(destination), Path(cwd))

    def install(self, package_manager, cwd):
        self._record("install", package_manager, Path(cwd))

    def remove_vcs_metadata(self, project_path):
        self._record("remove_vcs_metadata", Path(project_path))


@pytest.fixture
def fake_runner():
    """Return a fresh FakeRunner."""
    return FakeRunner()


@pytest.fixture
def runner_factory():
    """Return the FakeRunner class for tests that need custom outputs."""
    return FakeRunner


@pytest.fixture
def fake_tooling():
    """Return a fresh FakeTooling."""
    return FakeTooling()


@pytest.fixture
def tooling_factory():
    """Return the FakeTooling class for tests that need a failing step."""
    return FakeTooling


@pytest.fixture(autouse=True)
def _reset_language():
    """Run every test in English and restore it afterwards."""
    i18n.set_language("en")
    yield
    i18n.set_language("en")


@pytest.fixture
def no_tty(monkeypatch):
    """Force the line-input prompt fallback."""
    monkeypatch.setattr(prompts, "_stdin_is_tty", lambda: False)


@pytest.fixture
def feed_input(monkeypatch, no_tty):
    """Replace ``input`` with a queue of answers; EOF when exhausted."""

    def _feed(*answers):
        queue = list(answers)
        asked = []

        def _input(prompt=""):
            asked.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", _input)
        return asked

    return _feed
