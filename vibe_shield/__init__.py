"""
🛡️ vibe-shield - Hook pre-commit de segurança

Instala e remove o hook git que executa o scanner vibe-shield
nos arquivos staged antes de cada commit.
"""

from .__version__ import __version__

__all__ = ["__version__"]
