"""
vibe-shield - Git Repository Locator
Localiza o repositório git que contém um diretório.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple, Union


logger = logging.getLogger(__name__)


# =============================================================================
# Exceções
# =============================================================================

class GitError(Exception):
    """Erro ao inspecionar repositório git."""
    pass


class NotGitRepositoryError(GitError):
    """Diretório não pertence a um repositório git."""
    pass


# =============================================================================
# Descoberta
# =============================================================================

DOT_GIT = ".git"


def iter_ancestors(path: Path) -> Iterator[Path]:
    """
    Gera o próprio path e cada ancestral, até a raiz inclusive.

    Cada passo encurta o path em um componente; na raiz `path.parent == path`
    e a iteração para.
    """
    current = path
    while True:
        yield current
        parent = current.parent
        if parent == current:
            return
        current = parent


def find_git_dir(
    start_dir: Union[str, Path],
    exists: Callable[[Path], bool] = Path.exists,
) -> Optional[Path]:
    """
    Procura uma entrada `.git` em start_dir e em seus ancestrais.

    Args:
        start_dir: Diretório inicial (relativo ao cwd se não for absoluto)
        exists: Predicado de existência (injetável para testes)

    Returns:
        Path da entrada `.git` mais próxima, ou None se chegar à raiz sem achar
    """
    start = Path(os.path.abspath(start_dir))

    for directory in iter_ancestors(start):
        candidate = directory / DOT_GIT
        if exists(candidate):
            logger.debug("Repositório encontrado: %s", directory)
            return candidate

    logger.debug("Nenhum .git encontrado a partir de %s", start)
    return None


def resolve_git_dir(dot_git: Path) -> Path:
    """
    Resolve o diretório real do git (suporta worktrees e submódulos).

    Quando `.git` é um arquivo `gitdir: <path>`, retorna o diretório apontado.
    Se o arquivo não puder ser lido ou interpretado, retorna o próprio `.git`.
    """
    if not dot_git.is_file():
        return dot_git

    try:
        content = dot_git.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Não foi possível ler %s: %s", dot_git, e)
        return dot_git

    if not content.startswith("gitdir:"):
        return dot_git

    real_git_dir = Path(content.split(":", 1)[1].strip())
    if not real_git_dir.is_absolute():
        real_git_dir = dot_git.parent / real_git_dir

    logger.debug("gitdir redirecionado: %s -> %s", dot_git, real_git_dir)
    return real_git_dir


def find_repository(start_dir: Union[str, Path]) -> Tuple[Path, Path]:
    """
    Localiza o repositório de start_dir.

    Returns:
        Tupla (raiz do repositório, diretório git onde ficam os hooks)

    Raises:
        NotGitRepositoryError: Se nenhum ancestral contém `.git`
    """
    dot_git = find_git_dir(start_dir)
    if dot_git is None:
        raise NotGitRepositoryError(
            f"Diretório não é um repositório git: {start_dir}"
        )
    return dot_git.parent, resolve_git_dir(dot_git)


__all__ = [
    "GitError",
    "NotGitRepositoryError",
    "find_git_dir",
    "find_repository",
    "iter_ancestors",
    "resolve_git_dir",
]
