"""Git hook installation and management."""

from .install import (
    HOOK_SCRIPT,
    HookInstaller,
    check_hook_status,
    install_hook,
    uninstall_hook,
)

__all__ = [
    "HOOK_SCRIPT",
    "HookInstaller",
    "check_hook_status",
    "install_hook",
    "uninstall_hook",
]
