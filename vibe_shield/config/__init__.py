"""Configuration files for vibe-shield."""

from pathlib import Path

CONFIG_DIR = Path(__file__).parent
DEFAULT_HOOK_FILE = CONFIG_DIR / "hook.yaml"

__all__ = ["CONFIG_DIR", "DEFAULT_HOOK_FILE"]
