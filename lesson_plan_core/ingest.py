from __future__ import annotations

import asyncio
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

"""
lesson_plan_core.ingest
=======================

Descubrimiento de documentos de referencia en disco (input/ → LocalFile).

Responsabilidad
----------------
- Explorar la carpeta de insumos (no recursivo).
- Ignorar archivos ocultos (`.DS_Store`, `.gitkeep`, etc.).
- Exponer cada archivo como `FileSource` para que `media.encode_files`
  lo lea igual que un upload HTTP.

NO hace:
---------
- Lectura del contenido (eso ocurre al codificar, para que un error de
  lectura caiga en `ReadError` como en la API).
- Llamadas a LLM.
"""


@dataclass
class LocalFile:
    """Archivo local con la misma interfaz que `fastapi.UploadFile`."""

    path: Path
    filename: Optional[str] = None
    content_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.filename is None:
            self.filename = self.path.name
        if self.content_type is None:
            self.content_type, _ = mimetypes.guess_type(self.path.name)

    async def read(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)


def discover_input_files(input_dir: Path) -> List[LocalFile]:
    """
    Lista los documentos de `input_dir`, ordenados por nombre (determinista).

    Si la carpeta no existe, devuelve lista vacía.
    """
    if not input_dir.exists():
        return []

    return [
        LocalFile(path=p)
        for p in sorted(input_dir.iterdir())
        if p.is_file() and not p.name.startswith(".")
    ]
