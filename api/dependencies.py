"""
Dependencias de FastAPI.

- `get_completion_client`: cliente del LLM (se construye una sola vez; si falta
  OPENAI_API_KEY falla acá, en el borde del colaborador).
- `get_session`: estado único de la vista de generación.

En tests se reemplazan con `app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends

from lesson_plan_core.core.abstractions import CompletionService
from lesson_plan_core.engine import LessonPlanSession
from lesson_plan_core.llm_client import CompletionClient


@lru_cache
def get_completion_client() -> CompletionService:
    return CompletionClient()


_session: LessonPlanSession | None = None


def get_session(
    client: CompletionService = Depends(get_completion_client),
) -> LessonPlanSession:
    """
    Devuelve la sesión de generación del proceso.

    No hay estado multiusuario: una sola sesión para todo el proceso.
    """
    global _session
    if _session is None:
        _session = LessonPlanSession(client)
    return _session
