"""Repository discovery."""

from .git_repo import (
    GitError,
    NotGitRepositoryError,
    find_git_dir,
    find_repository,
    iter_ancestors,
    resolve_git_dir,
)

__all__ = [
    "GitError",
    "NotGitRepositoryError",
    "find_git_dir",
    "find_repository",
    "iter_ancestors",
    "resolve_git_dir",
]
