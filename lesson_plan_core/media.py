from __future__ import annotations

"""
lesson_plan_core.media
======================

Codificación de archivos subidos a partes aptas para el LLM (`EncodedPart`).

- Lee el archivo completo (`await source.read()`).
- Codifica a base64 y, si la fuente entregó un data URL, descarta el prefijo
  `data:<mime>;base64,` quedándose solo con el payload.
- Cualquier error de lectura se envuelve en `ReadError`.

Para un lote, todas las lecturas se lanzan juntas (`asyncio.gather`) y si una
falla falla el lote entero: nunca se manda un request parcial.
"""

import asyncio
import base64
import logging
import mimetypes
from typing import List, Sequence

from .core.abstractions import FileSource
from .domain_models import EncodedPart, UploadedFile
from .errors import ReadError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def strip_data_url_prefix(value: str) -> str:
    """
    `data:application/pdf;base64,JVBERi0x...` → `JVBERi0x...`.
    Si no es un data URL, lo devuelve sin cambios.
    """
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


def _resolve_mime_type(filename: str | None, content_type: str | None) -> str:
    if content_type:
        return content_type
    if filename:
        mime, _ = mimetypes.guess_type(filename)
        if mime:
            return mime
    return DEFAULT_MIME_TYPE


def encode_uploaded_file(uploaded: UploadedFile) -> EncodedPart:
    """Codifica un archivo ya leído. Determinista: mismos bytes → mismo payload."""
    b64 = base64.b64encode(uploaded.raw_bytes).decode("ascii")
    return EncodedPart(mime_type=uploaded.mime_type, base64_data=b64)


async def read_uploaded_file(source: FileSource) -> UploadedFile:
    """
    Lee una fuente completa a memoria.

    Raises:
        ReadError: si la lectura falla por cualquier motivo.
    """
    name = source.filename or ""
    try:
        content = await source.read()
    except Exception as e:
        raise ReadError(f"No se pudo leer el archivo '{name}': {e}") from e

    mime_type = _resolve_mime_type(name, source.content_type)

    if isinstance(content, str):
        # Ya viene como data URL / base64: validar y normalizar a bytes
        try:
            raw = base64.b64decode(strip_data_url_prefix(content), validate=True)
        except ValueError as e:
            raise ReadError(f"Contenido base64 inválido en '{name}': {e}") from e
    else:
        raw = bytes(content)

    return UploadedFile(name=name, mime_type=mime_type, raw_bytes=raw)


async def encode_file(source: FileSource) -> EncodedPart:
    """Lee y codifica una fuente. Ver `read_uploaded_file` para los errores."""
    uploaded = await read_uploaded_file(source)
    logger.debug(
        "Archivo codificado: %s (%s, %d bytes)",
        uploaded.name, uploaded.mime_type, len(uploaded.raw_bytes),
    )
    return encode_uploaded_file(uploaded)


async def encode_files(sources: Sequence[FileSource]) -> List[EncodedPart]:
    """
    Codifica un lote de archivos en paralelo, preservando el orden.

    Fail-fast: si una lectura falla, se propaga su `ReadError` y no se devuelve
    ninguna parte.
    """
    parts = await asyncio.gather(*(encode_file(s) for s in sources))
    return list(parts)
