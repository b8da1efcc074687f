"""Tests for the process capability in ``starterkit.setup.commands``."""

import subprocess
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from starterkit.exceptions import ExternalCommandError
from starterkit.setup import commands


def test_subprocess_runner_passes_cwd(monkeypatch, tmp_path: Path):
    seen = {}

    def fake_run(argv, **kwargs):
        seen["argv"] = argv
        seen.update(kwargs)
        return SimpleNamespace(stdout="v22.3.0\n", returncode=0)

    monkeypatch.setattr(commands.shutil, "which", lambda name: None)
    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    out = commands.SubprocessRunner().run(["node", "--version"], cwd=tmp_path)
    assert out == "v22.3.0\n"
    assert seen["argv"] == ["node", "--version"]
    assert seen["cwd"] == str(tmp_path)
    assert seen["check"] is True


def test_subprocess_runner_resolves_executable(monkeypatch, tmp_path: Path):
    seen = {}

    def fake_run(argv, **kwargs):
        seen["argv"] = argv
        return SimpleNamespace(stdout="", returncode=0)

    monkeypatch.setattr(commands.shutil, "which", lambda name: f"/opt/bin/{name}")
    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    commands.SubprocessRunner().run(["npm", "install"], cwd=tmp_path)
    assert seen["argv"] == ["/opt/bin/npm", "install"]


def test_subprocess_runner_missing_executable(monkeypatch, tmp_path: Path):
    def fake_run(argv, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", argv[0])

    monkeypatch.setattr(commands.shutil, "which", lambda name: None)
    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    with pytest.raises(ExternalCommandError, match="'pnpm' was not found"):
        commands.SubprocessRunner().run(["pnpm", "install"], cwd=tmp_path)


def test_subprocess_runner_non_zero_exit(monkeypatch, tmp_path: Path):
    def fake_run(argv, **kwargs):
        raise subprocess.CalledProcessError(
            128, argv, output="", stderr="fatal: repository not found\n"
        )

    monkeypatch.setattr(commands.shutil, "which", lambda name: None)
    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    with pytest.raises(ExternalCommandError) as info:
        commands.SubprocessRunner().run(["git", "clone", "x"], cwd=tmp_path)
    assert "exit code 128" in info.value.message
    assert "fatal: repository not found" in info.value.message
    assert info.value.context["returncode"] == 128
    assert info.value.context["cwd"] == str(tmp_path)


def test_shell_tooling_clone_is_shallow(fake_runner, tmp_path: Path):
    tooling = commands.ShellTooling(fake_runner)
    dest = tmp_path / "demo"
    tooling.clone("https://github.com/masb0ymas/express-api", dest, cwd=tmp_path)
    assert fake_runner.calls == [
        (
            ["git", "clone", "--depth", "1", "https://github.com/masb0ymas/express-api", str(dest)],
            tmp_path,
        )
    ]


def test_shell_tooling_install_uses_project_dir(fake_runner, tmp_path: Path):
    commands.ShellTooling(fake_runner).install("yarn", cwd=tmp_path)
    assert fake_runner.calls == [(["yarn"], tmp_path)]


def test_shell_tooling_removes_only_git(fake_runner, tmp_path: Path):
    project = tmp_path / "demo"
    (project / ".git" / "refs").mkdir(parents=True)
    (project / "src").mkdir()
    commands.ShellTooling(fake_runner).remove_vcs_metadata(project)
    assert not (project / ".git").exists()
    assert (project / "src").is_dir()
    assert fake_runner.calls == []


def test_shell_tooling_cleanup_failure(monkeypatch, fake_runner, tmp_path: Path):
    def boom(*_a, **_k):
        raise OSError("device busy")

    monkeypatch.setattr(commands, "safe_rmtree", boom)
    with pytest.raises(ExternalCommandError, match="device busy"):
        commands.ShellTooling(fake_runner).remove_vcs_metadata(tmp_path)


def test_subprocess_runner_unrunnable_executable(monkeypatch, tmp_path: Path):
    def fake_run(argv, **kwargs):
        raise OSError(8, "Exec format error", "/opt/bin/node")

    monkeypatch.setattr(commands.shutil, "which", lambda name: "/opt/bin/node")
    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    with pytest.raises(ExternalCommandError) as info:
        commands.SubprocessRunner().run(["node", "--version"], cwd=tmp_path)
    assert "'node' could not be run: Exec format error" in info.value.message
    assert info.value.context["errno"] == 8


def test_subprocess_runner_permission_denied(monkeypatch, tmp_path: Path):
    def fake_run(argv, **kwargs):
        raise PermissionError(13, "Permission denied", "/opt/bin/git")

    monkeypatch.setattr(commands.shutil, "which", lambda name: None)
    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    with pytest.raises(ExternalCommandError, match="could not be run: Permission denied"):
        commands.SubprocessRunner().run(["git", "clone", "x"], cwd=tmp_path)


def test_subprocess_runner_missing_cwd_is_not_a_missing_command(tmp_path: Path):
    gone = tmp_path / "gone"
    with pytest.raises(ExternalCommandError) as info:
        commands.SubprocessRunner().run([sys.executable, "--version"], cwd=gone)
    assert f"Working directory {gone} cannot be used" in info.value.message
    assert "was not found" not in info.value.message
