"""
Endpoints para generar y exportar planes de clase.

- POST /api/v1/lesson-plans: genera un plan (multipart: topic, duration, files)
- GET  /api/v1/lesson-plans/state: estado actual de la vista
- POST /api/v1/lesson-plans/export: descarga el plan como .docx
"""

import logging
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile

from lesson_plan_core.doc_engine import render_markdown_lite
from lesson_plan_core.engine import Failure, LessonPlanSession, Success
from lesson_plan_core.errors import GENERATION_FAILED_MESSAGE, RequestInFlightError, ValidationError
from lesson_plan_core.export import build_doc_export

from ..dependencies import get_session
from ..models.requests import LessonDuration, LessonPlanResponse, PlanStateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/lesson-plans", tags=["lesson-plans"])


def _content_disposition(filename: str) -> str:
    """
    `attachment` con nombre ASCII de respaldo + `filename*` (RFC 5987) para
    los nombres con tildes vietnamitas.
    """
    fallback = filename.encode("ascii", "ignore").decode("ascii")
    fallback = fallback.replace("\"", "").replace("\\", "") or "ke-hoach-bai-giang.docx"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@router.post("", response_model=LessonPlanResponse)
async def create_lesson_plan(
    topic: str = Form(""),
    duration: LessonDuration = Form(LessonDuration.MIN_45),
    files: List[UploadFile] = File(default=[]),
    session: LessonPlanSession = Depends(get_session),
):
    """
    Genera un plan de clase a partir del tema, la duración y los documentos.

    Returns:
        LessonPlanResponse con el texto crudo y el HTML renderizado.

    Errores:
        400 si falta el tema o los archivos, o si algún archivo no se pudo leer.
        409 si ya hay una generación en curso.
        502 si falla el servicio de IA.
    """
    # Un input file vacío puede llegar como upload sin nombre y sin bytes
    files = [f for f in files if f.filename]

    try:
        state = await session.generate(topic=topic, duration=duration.value, files=files)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.user_message)
    except RequestInFlightError as e:
        raise HTTPException(status_code=409, detail=e.user_message)

    if isinstance(state, Failure):
        # ReadError y ServiceError terminan acá con el mismo mensaje genérico
        status_code = 400 if state.reason == "read" else 502
        raise HTTPException(status_code=status_code, detail=state.message)

    if isinstance(state, Success):
        return LessonPlanResponse(
            topic=topic,
            duration=duration,
            lesson_plan=state.text,
            html=render_markdown_lite(state.text),
        )

    raise HTTPException(status_code=500, detail=GENERATION_FAILED_MESSAGE)


@router.get("/state", response_model=PlanStateResponse)
async def get_lesson_plan_state(session: LessonPlanSession = Depends(get_session)):
    """Devuelve el estado actual de la vista (idle | loading | success | error)."""
    return PlanStateResponse(**session.state.to_dict())


@router.post("/export")
async def export_lesson_plan(
    topic: str = Form(""),
    lesson_plan: str = Form(""),
):
    """
    Exporta el plan a un .docx (HTML con namespaces de Word).

    Si falta el tema o el plan, responde 204 sin cuerpo: no hay descarga.
    """
    export = build_doc_export(render_markdown_lite(lesson_plan), topic)
    if export is None:
        return Response(status_code=204)

    logger.info("Exportando plan '%s' (%d bytes)", export.filename, len(export.content))
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={
            "Content-Disposition": _content_disposition(export.filename),
            "Cache-Control": "no-cache, no-store, must-revalidate",
        },
    )
