from __future__ import annotations

"""
lesson_plan_core.doc_engine
===========================

Render de "markdown liviano" a HTML.

Soporta exactamente tres transformaciones, en este orden:

1) `**texto**` → `<strong>texto</strong>` (no codicioso: cierra en el
   delimitador más cercano).
2) `*texto*`   → `<em>texto</em>`, sin entrar en lo que ya quedó en negrita
   en el paso 1 (`**a*b*c**` → `<strong>a*b*c</strong>`). El cuerpo no puede
   ser vacío: `**` suelto queda literal.
3) `\\n`        → `<br />`.

NO es un parser de markdown: delimitadores sin par quedan literales y el
texto no se escapa. El mismo render se usa para mostrar y para exportar, así
que cualquier cambio acá impacta en los dos.
"""

import re

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
# Primera alternativa: spans ya en negrita (se dejan tal cual)
_ITALIC_RE = re.compile(r"(<strong>.*?</strong>)|\*(.+?)\*")
_NEWLINE_RE = re.compile(r"\n")


def _italic_sub(match: re.Match) -> str:
    if match.group(1) is not None:
        return match.group(1)
    return f"<em>{match.group(2)}</em>"


def render_markdown_lite(text: str | None) -> str:
    """
    Convierte el texto del LLM a HTML para mostrar o exportar.

    Args:
        text: Texto crudo (GenerationResult.raw_text). `None` o vacío → "".

    Returns:
        HTML con `<strong>`, `<em>` y `<br />`.
    """
    if not text:
        return ""
    html = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    html = _ITALIC_RE.sub(_italic_sub, html)
    return _NEWLINE_RE.sub("<br />", html)
