"""
lesson_plan_core.cli
====================

Punto de entrada mínimo para generar un plan de clase sin levantar la API:

1) Descubrir documentos en `input/` (o `--input`).
2) Correr el pipeline (codificar → prompt → LLM → render).
3) Exportar el .docx a `output/` (o `--output`).

Uso:
    python -m lesson_plan_core.cli --topic "Quang hợp ở thực vật" --duration "45 phút"
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .engine import run_lesson_plan_pipeline
from .errors import LessonPlanError
from .export import build_doc_export
from .ingest import discover_input_files
from .llm_client import CompletionClient
from .prompts import DEFAULT_DURATION, DURATION_OPTIONS


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Genera un kế hoạch bài giảng con IA")
    parser.add_argument("--topic", required=True, help="Tema de la clase")
    parser.add_argument("--duration", default=DEFAULT_DURATION, choices=DURATION_OPTIONS)
    parser.add_argument("--input", default=settings.input_dir, help="Carpeta con documentos")
    parser.add_argument("--output", default=settings.output_dir, help="Carpeta de salida")
    return parser.parse_args(argv)


def _local_filename(filename: str) -> str:
    """El tema puede traer separadores de ruta: el archivo siempre queda en output_dir."""
    for sep in {os.sep, os.altsep, "/"} - {None}:
        filename = filename.replace(sep, "-")
    return filename


async def _run(args: argparse.Namespace) -> Path:
    files = discover_input_files(Path(args.input))
    print(f"📦 Documentos detectados: {len(files)}")
    for f in files:
        print(f"   - {f.filename}")

    result = await run_lesson_plan_pipeline(
        topic=args.topic,
        duration=args.duration,
        files=files,
        client=CompletionClient(),
    )

    export = build_doc_export(result["html"], args.topic)
    if export is None:
        raise RuntimeError("No hay contenido para exportar")

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / _local_filename(export.filename)
    out_path.write_bytes(export.content)
    return out_path


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        out_path = asyncio.run(_run(args))
    except LessonPlanError as e:
        print(f"❌ {e.user_message}")
        print(f"   Detalle: {e}")
        return 1
    except OSError as e:
        print(f"❌ No se pudo escribir el plan: {e}")
        return 1

    print(f"✅ Plan generado en: {out_path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
