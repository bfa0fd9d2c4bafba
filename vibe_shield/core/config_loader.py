"""
vibe-shield - Config Loader
Carrega e valida a configuração do hook a partir de YAML.
"""

from pathlib import Path
from typing import Dict, Any, Tuple, Union
import yaml

from .models import HookConfig


# =============================================================================
# Exceções Customizadas
# =============================================================================

class ConfigLoadError(Exception):
    """Erro ao carregar arquivo de configuração."""
    pass


# =============================================================================
# Loader Principal
# =============================================================================

KNOWN_FIELDS = {"hook_name", "marker", "extensions", "scanner_command", "file_mode"}


def load_config_from_dict(data: Dict[str, Any]) -> HookConfig:
    """
    Converte um dicionário (já parseado do YAML) em HookConfig.

    Args:
        data: Conteúdo da seção 'hook' do YAML

    Returns:
        HookConfig validado

    Raises:
        ConfigLoadError: Se algum campo for inválido
    """
    if not isinstance(data, dict):
        raise ConfigLoadError("Seção 'hook' deve ser um objeto")

    unknown = set(data) - KNOWN_FIELDS
    if unknown:
        raise ConfigLoadError(f"Campos desconhecidos: {', '.join(sorted(unknown))}")

    kwargs: Dict[str, Any] = {}

    for key in ("hook_name", "marker", "scanner_command"):
        if key in data:
            if not isinstance(data[key], str):
                raise ConfigLoadError(f"Campo '{key}' deve ser string")
            kwargs[key] = data[key]

    if "extensions" in data:
        kwargs["extensions"] = _load_extensions(data["extensions"])

    if "file_mode" in data:
        kwargs["file_mode"] = _load_file_mode(data["file_mode"])

    try:
        return HookConfig(**kwargs)
    except ValueError as e:
        raise ConfigLoadError(str(e))


def _load_extensions(value: Any) -> Tuple[str, ...]:
    """Normaliza lista de extensões (aceita 'py' ou '.py')."""
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigLoadError("Campo 'extensions' deve ser uma lista de strings")

    extensions = [v.strip().lstrip(".") for v in value]
    for ext in extensions:
        if not ext.isalnum():
            raise ConfigLoadError(f"Extensão inválida: {ext!r}")
    return tuple(extensions)


def _load_file_mode(value: Any) -> int:
    """Aceita modo como inteiro ou string octal ('755', '0o755')."""
    if isinstance(value, bool):
        raise ConfigLoadError("Campo 'file_mode' inválido")
    if isinstance(value, int):
        mode = value
    elif isinstance(value, str):
        try:
            mode = int(value, 8)
        except ValueError:
            raise ConfigLoadError(f"file_mode não é octal: {value!r}")
    else:
        raise ConfigLoadError("Campo 'file_mode' deve ser inteiro ou string octal")

    if not 0 <= mode <= 0o777:
        raise ConfigLoadError(f"file_mode fora do intervalo: {oct(mode)}")
    return mode


def load_config(filepath: Union[str, Path]) -> HookConfig:
    """
    Carrega configuração de um arquivo YAML.

    Args:
        filepath: Caminho para o arquivo de configuração

    Returns:
        HookConfig carregado

    Raises:
        ConfigLoadError: Se não conseguir ler ou validar o arquivo
    """
    filepath = Path(filepath)

    if not filepath.is_file():
        raise ConfigLoadError(f"Arquivo não encontrado: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Erro ao parsear YAML: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Erro ao ler arquivo: {e}")

    if not isinstance(data, dict) or "hook" not in data:
        raise ConfigLoadError("Campo 'hook' não encontrado no YAML")

    return load_config_from_dict(data["hook"])


def load_default_config() -> HookConfig:
    """Carrega configuração padrão (config/hook.yaml)."""
    from ..config import DEFAULT_HOOK_FILE

    return load_config(DEFAULT_HOOK_FILE)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'ConfigLoadError',
    'load_config',
    'load_config_from_dict',
    'load_default_config',
]
