"""
vibe-shield - Git Hook Installer
Instala e remove o hook pre-commit que executa o vibe-shield nos arquivos staged.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from ..core.config_loader import load_default_config
from ..core.models import HookConfig, HookError, HookResult, HookStatus
from ..scanners.git_repo import NotGitRepositoryError, find_repository
from .template import render_hook_script


logger = logging.getLogger(__name__)


# =============================================================================
# Hook Template
# =============================================================================

DEFAULT_CONFIG = load_default_config()
HOOK_SCRIPT = render_hook_script(DEFAULT_CONFIG)


# =============================================================================
# Hook Installer Class
# =============================================================================

class HookInstaller:
    """Gerencia instalação e remoção do hook pre-commit de um repositório."""

    def __init__(
        self,
        repo_path: Path,
        git_dir: Path,
        config: HookConfig = DEFAULT_CONFIG,
    ):
        """
        Args:
            repo_path: Raiz do repositório git
            git_dir: Diretório git (`.git` ou o destino de um `gitdir:`)
            config: Configuração do hook
        """
        self.repo_path = Path(repo_path)
        self.git_dir = Path(git_dir)
        self.config = config
        self.hooks_dir = self.git_dir / "hooks"
        self.hook_path = self.hooks_dir / config.hook_name

        if config is DEFAULT_CONFIG:
            self.script = HOOK_SCRIPT
        else:
            self.script = render_hook_script(config)

    @classmethod
    def from_directory(
        cls,
        start_dir: Union[str, Path],
        config: HookConfig = DEFAULT_CONFIG,
    ) -> "HookInstaller":
        """
        Cria instalador para o repositório que contém start_dir.

        Raises:
            NotGitRepositoryError: Se start_dir não está dentro de um repositório
        """
        repo_path, git_dir = find_repository(start_dir)
        return cls(repo_path, git_dir, config)

    def is_ours(self, content: str) -> bool:
        """Verifica se o conteúdo contém a linha sentinela."""
        return self.config.marker in content

    def _read_hook(self) -> str:
        return self.hook_path.read_text(encoding="utf-8", errors="replace")

    def install(self) -> HookResult:
        """Instala o hook (nunca sobrescreve um hook existente)."""
        path = str(self.hook_path)

        if self.hook_path.exists():
            try:
                content = self._read_hook()
            except OSError as e:
                # Ilegível: segue como se não existisse; a escrita falha se for grave
                logger.debug("Hook existente ilegível, prosseguindo: %s", e)
            else:
                if self.is_ours(content):
                    return HookResult.fail(
                        HookError.ALREADY_INSTALLED,
                        "O hook do vibe-shield já está instalado.",
                        path,
                    )
                return HookResult.fail(
                    HookError.FOREIGN_HOOK_EXISTS,
                    f"Já existe um hook {self.config.hook_name}. "
                    "Remova-o primeiro ou adicione o vibe-shield manualmente.",
                    path,
                )

        try:
            self.hooks_dir.mkdir(parents=True, exist_ok=True)
            self.hook_path.write_text(self.script, encoding="utf-8")
            self.hook_path.chmod(self.config.file_mode)
        except OSError as e:
            logger.debug("Falha ao escrever %s: %s", path, e)
            return HookResult.fail(
                HookError.WRITE_FAILURE,
                f"Erro ao criar hook: {e}",
            )

        logger.info("Hook instalado em %s", path)
        return HookResult.ok("Hook pre-commit instalado com sucesso.", path)

    def uninstall(self) -> HookResult:
        """Remove o hook, apenas se foi instalado pelo vibe-shield."""
        path = str(self.hook_path)

        if not self.hook_path.exists():
            return HookResult.fail(
                HookError.NO_HOOK_FOUND,
                f"Nenhum hook {self.config.hook_name} encontrado.",
            )

        try:
            content = self._read_hook()
        except OSError as e:
            return HookResult.fail(
                HookError.READ_FAILURE,
                f"Não foi possível ler o hook: {e}",
                path,
            )

        if not self.is_ours(content):
            return HookResult.fail(
                HookError.NOT_OUR_HOOK,
                f"O hook {self.config.hook_name} atual não foi instalado pelo vibe-shield.",
                path,
            )

        try:
            self.hook_path.unlink()
        except OSError as e:
            return HookResult.fail(
                HookError.DELETE_FAILURE,
                f"Erro ao remover hook: {e}",
                path,
            )

        logger.info("Hook removido de %s", path)
        return HookResult.ok("Hook pre-commit removido.", path)

    def status(self) -> HookStatus:
        """Retorna status detalhado do hook."""
        status = HookStatus(
            repo_path=str(self.repo_path),
            hooks_dir=str(self.hooks_dir),
            hook_path=str(self.hook_path),
        )

        if not self.hook_path.exists():
            return status

        status.installed = True
        try:
            status.executable = self.hook_path.stat().st_mode & 0o111 != 0
            status.is_ours = self.is_ours(self._read_hook())
        except OSError as e:
            status.error = str(e)

        return status


# =============================================================================
# Helper Functions
# =============================================================================

def install_hook(
    start_dir: Union[str, Path],
    config: Optional[HookConfig] = None,
) -> HookResult:
    """
    Instala o hook no repositório que contém start_dir.

    Args:
        start_dir: Diretório dentro do repositório
        config: Configuração do hook (None = padrão)

    Returns:
        HookResult; erros nunca são levantados como exceção
    """
    try:
        installer = HookInstaller.from_directory(start_dir, config or DEFAULT_CONFIG)
    except NotGitRepositoryError:
        return HookResult.fail(
            HookError.NOT_A_GIT_REPOSITORY,
            "Não é um repositório git. Execute 'git init' primeiro.",
        )
    return installer.install()


def uninstall_hook(
    start_dir: Union[str, Path],
    config: Optional[HookConfig] = None,
) -> HookResult:
    """Remove o hook do vibe-shield do repositório que contém start_dir."""
    try:
        installer = HookInstaller.from_directory(start_dir, config or DEFAULT_CONFIG)
    except NotGitRepositoryError:
        return HookResult.fail(
            HookError.NOT_A_GIT_REPOSITORY,
            "Não é um repositório git.",
        )
    return installer.uninstall()


def check_hook_status(
    start_dir: Union[str, Path],
    config: Optional[HookConfig] = None,
) -> HookStatus:
    """
    Verifica status do hook.

    Raises:
        NotGitRepositoryError: Se start_dir não está dentro de um repositório
    """
    installer = HookInstaller.from_directory(start_dir, config or DEFAULT_CONFIG)
    return installer.status()


def print_result(result: HookResult, console=None):
    """Printa resultado de install/uninstall (helper para CLI)."""
    from rich.console import Console

    console = console or Console()

    if result.success:
        console.print(f"✅ {result.message}", style="green")
    elif result.is_benign:
        console.print(f"ℹ️  {result.message}", style="cyan")
    else:
        console.print(f"❌ {result.message}", style="red")

    if result.path:
        console.print(f"   {result.path}", style="dim")


def print_status(status: HookStatus, console=None):
    """Printa status do hook (helper para CLI)."""
    from rich.console import Console
    from rich.table import Table

    console = console or Console()

    console.print(f"\n📁 Repositório: {status.repo_path}")
    console.print(f"📂 Hooks dir: {status.hooks_dir}\n")

    table = Table(title="Status do Hook")
    table.add_column("Hook", style="cyan")
    table.add_column("Instalado", style="yellow")
    table.add_column("vibe-shield", style="green")
    table.add_column("Executável", style="magenta")

    installed = "✅" if status.installed else "❌"
    is_ours = "✅" if status.is_ours else "❌"
    executable = "✅" if status.executable else "❌"

    table.add_row(Path(status.hook_path).name, installed, is_ours, executable)
    console.print(table)

    if status.error:
        console.print(f"⚠️  {status.error}", style="yellow")
