from __future__ import annotations

"""
lesson_plan_core.domain_models
==============================

Modelos de dominio (dataclasses) usados a lo largo del pipeline.

- `UploadedFile`: archivo elegido por el docente, ya leído a memoria.
- `EncodedPart`: contenido en base64 + media type, listo para el LLM.
- `GenerationRequest`: instrucción + partes, armado de cero en cada corrida.
- `GenerationResult`: texto devuelto por el LLM (fuente de verdad para render/export).

Dataclasses sin lógica: este módulo NO habla con OpenAI ni hace IO.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class UploadedFile:
    name: str
    mime_type: str
    raw_bytes: bytes


@dataclass(frozen=True)
class EncodedPart:
    mime_type: str
    base64_data: str


@dataclass(frozen=True)
class GenerationRequest:
    prompt_text: str
    parts: Tuple[EncodedPart, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GenerationResult:
    raw_text: str
