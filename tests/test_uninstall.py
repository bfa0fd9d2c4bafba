"""Tests for hook removal."""

import pathlib

import pytest

from vibe_shield.core.models import HookError
from vibe_shield.hooks.install import (
    HookInstaller,
    check_hook_status,
    install_hook,
    uninstall_hook,
)
from vibe_shield.scanners.git_repo import NotGitRepositoryError


def test_uninstall_outside_repository(tmp_path, no_git_ancestor):
    result = uninstall_hook(tmp_path)

    assert not result.success
    assert result.error == HookError.NOT_A_GIT_REPOSITORY
    assert list(tmp_path.iterdir()) == []


def test_uninstall_removes_our_hook(temp_git_repo, installed_hook):
    result = uninstall_hook(temp_git_repo)

    assert result.success
    assert result.path == str(installed_hook)
    assert not installed_hook.exists()


def test_uninstall_twice_reports_no_hook(temp_git_repo, installed_hook):
    uninstall_hook(temp_git_repo)

    result = uninstall_hook(temp_git_repo)

    assert not result.success
    assert result.error == HookError.NO_HOOK_FOUND


def test_uninstall_without_hooks_dir(temp_git_repo):
    result = uninstall_hook(temp_git_repo)

    assert result.error == HookError.NO_HOOK_FOUND


def test_uninstall_keeps_foreign_hook(temp_git_repo, foreign_hook):
    original = foreign_hook.read_text()

    result = uninstall_hook(temp_git_repo)

    assert not result.success
    assert result.error == HookError.NOT_OUR_HOOK
    assert result.path == str(foreign_hook)
    assert foreign_hook.read_text() == original


def test_install_then_uninstall_from_subdirectory(temp_git_repo, hook_path):
    nested = temp_git_repo / "lib" / "deep"
    nested.mkdir(parents=True)

    assert install_hook(nested).success
    assert uninstall_hook(nested).success
    assert not hook_path.exists()
    assert hook_path.parent.is_dir()


def test_uninstall_read_failure(temp_git_repo, installed_hook, monkeypatch):
    def unreadable(self):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(HookInstaller, "_read_hook", unreadable)

    result = uninstall_hook(temp_git_repo)

    assert not result.success
    assert result.error == HookError.READ_FAILURE
    assert installed_hook.exists()


def test_uninstall_delete_failure(temp_git_repo, installed_hook, monkeypatch):
    def failing_unlink(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(pathlib.Path, "unlink", failing_unlink)

    result = uninstall_hook(temp_git_repo)

    assert not result.success
    assert result.error == HookError.DELETE_FAILURE
    assert "Permission denied" in result.message


def test_status_reports_foreign_hook(temp_git_repo, foreign_hook):
    status = check_hook_status(temp_git_repo)

    assert status.installed
    assert not status.is_ours
    assert status.hook_path == str(foreign_hook)


def test_status_outside_repository(tmp_path, no_git_ancestor):
    with pytest.raises(NotGitRepositoryError):
        check_hook_status(tmp_path)


def test_status_unreadable_hook_still_reports_executable(temp_git_repo, installed_hook, monkeypatch):
    def unreadable(self):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(HookInstaller, "_read_hook", unreadable)

    status = check_hook_status(temp_git_repo)

    assert status.installed
    assert status.executable
    assert not status.is_ours
    assert "Permission denied" in status.error
