"""Core modules for vibe-shield."""

from .config_loader import (
    ConfigLoadError,
    load_config,
    load_config_from_dict,
    load_default_config,
)
from .models import (
    HookConfig,
    HookError,
    HookResult,
    HookStatus,
)

__all__ = [
    # Models
    "HookConfig",
    "HookError",
    "HookResult",
    "HookStatus",
    # Loaders
    "ConfigLoadError",
    "load_config",
    "load_config_from_dict",
    "load_default_config",
]
