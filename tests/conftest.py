"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from vibe_shield.hooks.install import HOOK_SCRIPT


@pytest.fixture
def temp_git_repo(tmp_path):
    """Cria repositório git temporário (apenas o diretório .git)."""
    repo_dir = tmp_path / "test_repo"
    (repo_dir / ".git").mkdir(parents=True)
    return repo_dir


@pytest.fixture
def hook_path(temp_git_repo):
    """Caminho esperado do hook pre-commit."""
    return temp_git_repo / ".git" / "hooks" / "pre-commit"


@pytest.fixture
def foreign_hook(hook_path):
    """Hook pre-commit escrito por outra ferramenta."""
    hook_path.parent.mkdir(parents=True)
    hook_path.write_text("#!/bin/sh\necho 'lint'\nexit 0\n")
    return hook_path


@pytest.fixture
def installed_hook(hook_path):
    """Hook do vibe-shield já presente."""
    hook_path.parent.mkdir(parents=True)
    hook_path.write_text(HOOK_SCRIPT)
    hook_path.chmod(0o755)
    return hook_path


@pytest.fixture
def no_git_ancestor(monkeypatch):
    """Percorre os ancestrais reais sem enxergar nenhum `.git`."""
    from vibe_shield.scanners import git_repo

    real_find_git_dir = git_repo.find_git_dir
    visited = []

    def exists(path):
        visited.append(path)
        return False

    def find_git_dir(start_dir, exists=exists):
        return real_find_git_dir(start_dir, exists=exists)

    monkeypatch.setattr(git_repo, "find_git_dir", find_git_dir)
    return visited
