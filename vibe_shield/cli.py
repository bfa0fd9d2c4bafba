"""
vibe-shield - Command Line Interface
Comandos para instalar, remover e inspecionar o hook pre-commit.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from vibe_shield.__version__ import __version__
from vibe_shield.core.models import HookResult
from vibe_shield.scanners.git_repo import NotGitRepositoryError
from vibe_shield.hooks.install import (
    install_hook,
    uninstall_hook,
    check_hook_status,
    print_result,
    print_status,
)


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="vibe-shield",
    help="🛡️ vibe-shield - Hook pre-commit de segurança",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configura logging via rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _emit(result: HookResult, as_json: bool) -> None:
    """Mostra resultado e encerra com o exit code apropriado."""
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_result(result, console)

    raise typer.Exit(0 if result.is_benign else 1)


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🛡️ vibe-shield version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do vibe-shield"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Mostra logs de depuração"
    ),
):
    """
    🛡️ vibe-shield - Hook pre-commit de segurança

    Instala um hook git que analisa arquivos staged antes de cada commit.
    """
    setup_logging(verbose)


# =============================================================================
# Command: install
# =============================================================================

PATH_ARGUMENT_HELP = "Diretório dentro do repositório (default: diretório atual)"


@app.command()
def install(
    path: Path = typer.Argument(
        Path("."),
        help=PATH_ARGUMENT_HELP
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Output em JSON"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Mostra logs de depuração"
    ),
):
    """
    🪝 Instala o hook pre-commit

    Exemplos:

    \b
    # No repositório atual
    vibe-shield install

    \b
    # Em outro repositório, com logs
    vibe-shield install ../outro-projeto --verbose
    """
    if verbose:
        setup_logging(verbose)
    _emit(install_hook(path), as_json)


# =============================================================================
# Command: uninstall
# =============================================================================

@app.command()
def uninstall(
    path: Path = typer.Argument(
        Path("."),
        help=PATH_ARGUMENT_HELP
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Output em JSON"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Mostra logs de depuração"
    ),
):
    """
    🗑️ Remove o hook pre-commit instalado pelo vibe-shield

    Hooks de terceiros nunca são removidos.
    """
    if verbose:
        setup_logging(verbose)
    _emit(uninstall_hook(path), as_json)


# =============================================================================
# Command: status
# =============================================================================

@app.command()
def status(
    path: Path = typer.Argument(
        Path("."),
        help=PATH_ARGUMENT_HELP
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Output em JSON"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Mostra logs de depuração"
    ),
):
    """
    📊 Mostra status do hook pre-commit
    """
    if verbose:
        setup_logging(verbose)

    try:
        status_info = check_hook_status(path)
    except NotGitRepositoryError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(status_info.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_status(status_info, console)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
