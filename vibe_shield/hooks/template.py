"""
vibe-shield - Hook Template
Gera o script shell do hook pre-commit.
"""

from ..core.models import HookConfig


PRE_COMMIT_TEMPLATE = """#!/bin/sh
{marker}
# Analisa arquivos staged em busca de problemas de segurança antes do commit

# Arquivos staged (adicionados, copiados, modificados, renomeados)
STAGED_FILES=$(git diff --cached --name-only --diff-filter=ACMR | grep -E '\\.({extensions})$' || true)

if [ -z "$STAGED_FILES" ]; then
  exit 0
fi

echo "🛡️  Executando análise de segurança do vibe-shield..."

TEMP_FILE=$(mktemp)
echo "$STAGED_FILES" > "$TEMP_FILE"

FAILED=0
while IFS= read -r file; do
  if [ -f "$file" ]; then
    {scanner} scan "$file" --json > /dev/null 2>&1
    if [ $? -ne 0 ]; then
      FAILED=1
    fi
  fi
done < "$TEMP_FILE"

rm -f "$TEMP_FILE"

if [ $FAILED -ne 0 ]; then
  echo ""
  echo "❌ Problemas de segurança encontrados! Execute '{scanner}' para detalhes."
  echo "   Para ignorar: git commit --no-verify"
  exit 1
fi

echo "✓ Nenhum problema de segurança encontrado."
exit 0
"""


def render_hook_script(config: HookConfig) -> str:
    """
    Renderiza o script do hook a partir da configuração.

    Args:
        config: Configuração do hook

    Returns:
        Conteúdo completo do script (começa com shebang, sentinela na linha 2)
    """
    return PRE_COMMIT_TEMPLATE.format(
        marker=config.marker,
        extensions="|".join(config.extensions),
        scanner=config.scanner_command,
    )


__all__ = ["PRE_COMMIT_TEMPLATE", "render_hook_script"]
