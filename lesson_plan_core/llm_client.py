from __future__ import annotations

import base64
import binascii
import logging
import mimetypes
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from .config import get_settings
from .domain_models import EncodedPart, GenerationRequest, GenerationResult
from .errors import ServiceError

logger = logging.getLogger(__name__)


def get_client() -> AsyncOpenAI:
    settings = get_settings()
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY no está configurada en el .env")
    # Sin reintentos automáticos: una falla se reporta tal cual
    return AsyncOpenAI(api_key=settings.openai_api_key, max_retries=0)


def _data_url(part: EncodedPart) -> str:
    return f"data:{part.mime_type};base64,{part.base64_data}"


def _part_to_content(part: EncodedPart, index: int) -> Dict[str, Any]:
    """
    Traduce una `EncodedPart` al bloque de contenido de chat.completions:

    - image/* → image_url (data URL)
    - text/*  → texto plano decodificado
    - resto   → file (data URL), p. ej. PDF
    """
    if part.mime_type.startswith("image/"):
        return {"type": "image_url", "image_url": {"url": _data_url(part)}}

    if part.mime_type.startswith("text/"):
        try:
            text = base64.b64decode(part.base64_data).decode("utf-8", errors="replace")
        except (binascii.Error, ValueError):
            text = ""
        if text:
            return {"type": "text", "text": f"=== TÀI LIỆU {index} ===\n{text}"}

    ext = mimetypes.guess_extension(part.mime_type) or ""
    return {
        "type": "file",
        "file": {"filename": f"tai-lieu-{index}{ext}", "file_data": _data_url(part)},
    }


def build_message_content(request: GenerationRequest) -> List[Dict[str, Any]]:
    """Instrucción primero, después una parte por archivo (en orden)."""
    content: List[Dict[str, Any]] = [{"type": "text", "text": request.prompt_text}]
    for i, part in enumerate(request.parts, start=1):
        content.append(_part_to_content(part, i))
    return content


class CompletionClient:
    """
    Cliente del servicio de completions (OpenAI chat.completions, async).

    Contrato: `complete(request)` → `GenerationResult` | `ServiceError`.
    No reintenta ni aplica timeout propio.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        settings = get_settings()
        if client is None:
            client = AsyncOpenAI(api_key=api_key, max_retries=0) if api_key else get_client()
        self._client = client
        self.model = model or settings.openai_model_text

    async def complete(self, request: GenerationRequest) -> GenerationResult:
        """
        Genera el plan a partir de la instrucción + documentos.

        Raises:
            ServiceError: error de la API, respuesta sin choices o texto vacío.
        """
        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": build_message_content(request)}],
            )
        except OpenAIError as e:
            raise ServiceError(f"Falló la llamada al LLM: {e}") from e

        choices = getattr(completion, "choices", None) or []
        if not choices:
            raise ServiceError("Respuesta del LLM sin choices")

        text = choices[0].message.content or ""
        if not text.strip():
            raise ServiceError("El LLM devolvió una respuesta vacía")

        logger.info("Plan generado con %s (%d caracteres)", self.model, len(text))
        return GenerationResult(raw_text=text)
