"""
vibe-shield - Core Data Models
Estruturas de dados do gerenciador de hooks.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple
from enum import Enum


# =============================================================================
# Enums
# =============================================================================

class HookError(str, Enum):
    """Motivos pelos quais uma operação de hook não foi concluída."""
    NOT_A_GIT_REPOSITORY = "not_a_git_repository"
    ALREADY_INSTALLED = "already_installed"
    FOREIGN_HOOK_EXISTS = "foreign_hook_exists"
    WRITE_FAILURE = "write_failure"
    READ_FAILURE = "read_failure"
    DELETE_FAILURE = "delete_failure"
    NO_HOOK_FOUND = "no_hook_found"
    NOT_OUR_HOOK = "not_our_hook"


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class HookConfig:
    """Configuração imutável do hook gerado."""
    hook_name: str = "pre-commit"
    marker: str = "# vibe-shield pre-commit hook"
    extensions: Tuple[str, ...] = ("js", "ts", "jsx", "tsx", "py", "mjs", "cjs")
    scanner_command: str = "npx vibe-shield"
    file_mode: int = 0o755

    def __post_init__(self):
        """Valida campos obrigatórios."""
        if not self.hook_name or "/" in self.hook_name:
            raise ValueError(f"hook_name inválido: {self.hook_name!r}")
        if not self.marker.startswith("#"):
            raise ValueError("marker deve ser um comentário shell (começar com '#')")
        if "\n" in self.marker:
            raise ValueError("marker deve ocupar uma única linha")
        if not self.extensions:
            raise ValueError("extensions requer pelo menos uma extensão")
        if not self.scanner_command.strip():
            raise ValueError("scanner_command não pode ser vazio")


# =============================================================================
# Results
# =============================================================================

@dataclass
class HookResult:
    """Resultado de uma operação de install/uninstall."""
    success: bool
    message: str
    path: Optional[str] = None
    error: Optional[HookError] = None

    @classmethod
    def ok(cls, message: str, path: str) -> "HookResult":
        return cls(success=True, message=message, path=path)

    @classmethod
    def fail(cls, error: HookError, message: str, path: Optional[str] = None) -> "HookResult":
        return cls(success=False, message=message, path=path, error=error)

    @property
    def is_benign(self) -> bool:
        """Sucesso ou hook já instalado (não é erro para o usuário)."""
        return self.success or self.error == HookError.ALREADY_INSTALLED

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário (output JSON)."""
        data: Dict[str, Any] = {
            "success": self.success,
            "message": self.message,
        }
        if self.path is not None:
            data["path"] = self.path
        if self.error is not None:
            data["error"] = self.error.value
        return data


@dataclass
class HookStatus:
    """Estado atual do hook em um repositório."""
    repo_path: str
    hooks_dir: str
    hook_path: str
    installed: bool = False
    is_ours: bool = False
    executable: bool = False
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "repo_path": self.repo_path,
            "hooks_dir": self.hooks_dir,
            "hook_path": self.hook_path,
            "installed": self.installed,
            "is_ours": self.is_ours,
            "executable": self.executable,
            "error": self.error,
        }


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "HookError",
    "HookConfig",
    "HookResult",
    "HookStatus",
]
