"""
lesson_plan_core.export.docx_html
=================================

Exportador "Word" basado en HTML disfrazado.

Word abre sin problemas un HTML con los namespaces de Office aunque venga
con extensión .docx. El archivo se arma así:

    BOM UTF-8 + <html xmlns:o xmlns:w ...><head>...</head><body>{html}</body></html>

El BOM va adelante para que Word detecte el encoding (sin él los acentos
vietnamitas salen rotos).

Todo se arma en memoria: la capa que entrega el archivo (HTTP o CLI) decide
dónde va, y no queda nada temporal que limpiar.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
FILENAME_PREFIX = "ke-hoach-bai-giang-"
FILENAME_EXT = ".docx"
DOCUMENT_TITLE = "Kế hoạch bài giảng"

_BOM = "\ufeff"
_PRE_HTML = (
    "<html xmlns:o='urn:schemas-microsoft-com:office:office' "
    "xmlns:w='urn:schemas-microsoft-com:office:word' "
    "xmlns='http://www.w3.org/TR/REC-html40'>"
    f"<head><meta charset='utf-8'><title>{DOCUMENT_TITLE}</title></head><body>"
)
_POST_HTML = "</body></html>"

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class DocExport:
    """
    Archivo listo para descargar.

    Attributes
    ----------
    filename:
        `ke-hoach-bai-giang-<slug>.docx`.
    media_type:
        Siempre `DOCX_MEDIA_TYPE`.
    content:
        Bytes UTF-8 (con BOM al inicio).
    """

    filename: str
    media_type: str
    content: bytes


def lesson_plan_filename(topic: str) -> str:
    """Cada tramo de espacios → un guion, todo en minúsculas."""
    slug = _WHITESPACE_RE.sub("-", topic).lower()
    return f"{FILENAME_PREFIX}{slug}{FILENAME_EXT}"


def build_doc_export(rendered_html: str, topic: str) -> Optional[DocExport]:
    """
    Empaqueta el HTML ya renderizado en un .docx "HTML".

    Args:
        rendered_html: Salida de `render_markdown_lite`.
        topic: Tema de la clase (se usa para el nombre del archivo).

    Returns:
        `DocExport`, o `None` si falta contenido o tema (no hay nada que exportar).
    """
    if not rendered_html or not topic:
        return None

    body = f"{_BOM}{_PRE_HTML}{rendered_html}{_POST_HTML}"
    return DocExport(
        filename=lesson_plan_filename(topic),
        media_type=DOCX_MEDIA_TYPE,
        content=body.encode("utf-8"),
    )
