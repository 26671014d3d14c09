from __future__ import annotations

"""
lesson_plan_core.engine
=======================

Orquestador de alto nivel del pipeline de planes de clase.

Flujo (`run_lesson_plan_pipeline`):
-----------------------------------
1) Validación: tema no vacío y al menos un archivo (`ValidationError`, sin IO).
2) Codificación de archivos en paralelo (`media.encode_files`), fail-fast.
3) Prompt (`prompts.build_lesson_plan_prompt`).
4) Una sola llamada al servicio de completions.
5) Render a HTML (`doc_engine.render_markdown_lite`).

Estado de la vista (`LessonPlanSession`):
-----------------------------------------
El trío "plan / error / cargando" se modela como una sola variante:

    Idle | Loading | Success(text) | Failure(message)

Cada generación pasa por `Loading` (limpia el resultado anterior) y termina
exactamente en un `Success` o un `Failure`. Mientras está en `Loading` no se
acepta otra generación.

Este módulo NO sabe de HTTP: la API y la CLI lo llaman.
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Sequence, TypedDict, Union

from .core.abstractions import CompletionService, FileSource
from .doc_engine import render_markdown_lite
from .domain_models import GenerationRequest
from .errors import (
    GENERATION_FAILED_MESSAGE,
    ReadError,
    RequestInFlightError,
    ServiceError,
    ValidationError,
)
from .media import encode_files
from .prompts import build_lesson_plan_prompt

logger = logging.getLogger(__name__)


class LessonPlanRunResult(TypedDict):
    """Resultado de una corrida completa del pipeline."""

    prompt: str
    """Instrucción enviada al LLM."""

    text: str
    """Texto crudo devuelto por el LLM (fuente de verdad)."""

    html: str
    """Texto renderizado con `render_markdown_lite`."""


# ============================================================
# Estado de la vista
# ============================================================

@dataclass(frozen=True)
class Idle:
    status: ClassVar[str] = "idle"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True)
class Loading:
    status: ClassVar[str] = "loading"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True)
class Success:
    text: str
    status: ClassVar[str] = "success"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "lesson_plan": self.text,
            "html": render_markdown_lite(self.text),
        }


@dataclass(frozen=True)
class Failure:
    message: str
    reason: str = "service"
    status: ClassVar[str] = "error"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "error": self.message, "reason": self.reason}


PlanState = Union[Idle, Loading, Success, Failure]


# ============================================================
# Pipeline
# ============================================================

def validate_inputs(topic: str, files: Sequence[FileSource]) -> None:
    """
    Raises:
        ValidationError: si falta el tema o no hay archivos.
    """
    if not topic or not files:
        raise ValidationError("Se requiere tema y al menos un archivo")


async def run_lesson_plan_pipeline(
    *,
    topic: str,
    duration: str,
    files: Sequence[FileSource],
    client: CompletionService,
) -> LessonPlanRunResult:
    """
    Ejecuta el pipeline completo (sin escribir archivos).

    Args:
        topic: Tema de la clase.
        duration: Duración (ej: "45 phút").
        files: Documentos de referencia, aún sin leer.
        client: Servicio de completions.

    Raises:
        ValidationError: faltan datos (antes de cualquier IO).
        ReadError: algún archivo no se pudo leer; no se llama al LLM.
        ServiceError: falló el LLM.
    """
    validate_inputs(topic, files)

    parts = await encode_files(files)
    prompt = build_lesson_plan_prompt(topic, duration)
    request = GenerationRequest(prompt_text=prompt, parts=tuple(parts))

    logger.info("Generando plan: tema=%r duración=%r archivos=%d", topic, duration, len(parts))
    result = await client.complete(request)

    return LessonPlanRunResult(
        prompt=prompt,
        text=result.raw_text,
        html=render_markdown_lite(result.raw_text),
    )


class LessonPlanSession:
    """
    Estado de la vista de generación (un solo usuario).

    `state` solo se modifica acá, y por corrida se escribe dos veces:
    `Loading` al empezar y el resultado final al terminar.
    """

    def __init__(self, client: CompletionService) -> None:
        self.client = client
        self.state: PlanState = Idle()

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    async def generate(
        self,
        *,
        topic: str,
        duration: str,
        files: Sequence[FileSource],
    ) -> PlanState:
        """
        Corre el pipeline y deja el estado final en `self.state`.

        Raises:
            RequestInFlightError: ya hay una generación en curso.
            ValidationError: faltan datos; el estado no se toca.
        """
        if self.is_loading:
            raise RequestInFlightError("Generación en curso")
        validate_inputs(topic, files)

        self.state = Loading()
        try:
            result = await run_lesson_plan_pipeline(
                topic=topic,
                duration=duration,
                files=files,
                client=self.client,
            )
        except ReadError:
            logger.exception("No se pudieron leer los documentos para el tema %r", topic)
            self.state = Failure(GENERATION_FAILED_MESSAGE, reason="read")
        except ServiceError:
            logger.exception("Falló el servicio de IA para el tema %r", topic)
            self.state = Failure(GENERATION_FAILED_MESSAGE, reason="service")
        else:
            self.state = Success(result["text"])
        finally:
            # Error inesperado o cancelación: la vista nunca queda trabada en Loading
            if self.is_loading:
                self.state = Failure(GENERATION_FAILED_MESSAGE, reason="unexpected")
        return self.state
