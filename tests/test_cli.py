"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from vibe_shield.__version__ import __version__
from vibe_shield.cli import app


runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_install_and_uninstall(temp_git_repo, hook_path):
    result = runner.invoke(app, ["install", str(temp_git_repo)])
    assert result.exit_code == 0
    assert hook_path.exists()

    result = runner.invoke(app, ["uninstall", str(temp_git_repo)])
    assert result.exit_code == 0
    assert not hook_path.exists()


def test_install_twice_is_benign(temp_git_repo):
    runner.invoke(app, ["install", str(temp_git_repo)])

    result = runner.invoke(app, ["install", str(temp_git_repo), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["success"] is False
    assert data["error"] == "already_installed"


def test_install_foreign_hook_fails(temp_git_repo, foreign_hook):
    result = runner.invoke(app, ["install", str(temp_git_repo), "--json"])

    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["error"] == "foreign_hook_exists"
    assert data["path"] == str(foreign_hook)


def test_uninstall_missing_hook_fails(temp_git_repo):
    result = runner.invoke(app, ["uninstall", str(temp_git_repo), "--json"])

    assert result.exit_code == 1
    assert json.loads(result.output)["error"] == "no_hook_found"


def test_status(temp_git_repo, installed_hook):
    result = runner.invoke(app, ["status", str(temp_git_repo)])

    assert result.exit_code == 0
    assert "pre-commit" in result.output


def test_verbose_before_command(temp_git_repo):
    result = runner.invoke(app, ["--verbose", "install", str(temp_git_repo)])

    assert result.exit_code == 0


def test_verbose_after_command(temp_git_repo, hook_path):
    result = runner.invoke(app, ["install", str(temp_git_repo), "--verbose"])
    assert result.exit_code == 0
    assert hook_path.exists()

    result = runner.invoke(app, ["uninstall", str(temp_git_repo), "--json", "--verbose"])
    assert result.exit_code == 0
    assert not hook_path.exists()

    result = runner.invoke(app, ["status", str(temp_git_repo), "-v"])
    assert result.exit_code == 0


def test_status_json(temp_git_repo, installed_hook):
    result = runner.invoke(app, ["status", str(temp_git_repo), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["installed"] is True
    assert data["is_ours"] is True
    assert data["executable"] is True
    assert data["hook_path"] == str(installed_hook)
    assert data["error"] is None


def test_status_outside_repository(tmp_path, no_git_ancestor):
    result = runner.invoke(app, ["status", str(tmp_path), "--json"])

    assert result.exit_code == 1
