"""
Modelos de request/response para la API.

Estos modelos definen la estructura de los requests HTTP y de las respuestas,
validando tipos y valores antes de pasarlos al core.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class LessonDuration(str, Enum):
    """Duración de la clase (opciones del selector)."""

    MIN_35 = "35 phút"
    MIN_45 = "45 phút"


class LessonPlanResponse(BaseModel):
    """
    Response de una generación exitosa.

    Nota: los archivos llegan aparte (multipart/form-data), no en un modelo.
    """

    status: str = Field(default="success", description="Siempre 'success'")
    topic: str = Field(..., description="Tema de la clase")
    duration: LessonDuration = Field(..., description="Duración elegida")
    lesson_plan: str = Field(..., description="Texto crudo devuelto por el LLM")
    html: str = Field(..., description="Plan renderizado (strong/em/br)")


class PlanStateResponse(BaseModel):
    """Estado actual de la vista: idle | loading | success | error."""

    status: str = Field(..., description="idle|loading|success|error")
    lesson_plan: Optional[str] = Field(default=None, description="Texto del plan si status='success'")
    html: Optional[str] = Field(default=None, description="Plan renderizado si status='success'")
    error: Optional[str] = Field(default=None, description="Mensaje de error si status='error'")
    reason: Optional[str] = Field(default=None, description="Origen del error: read|service|unexpected")
