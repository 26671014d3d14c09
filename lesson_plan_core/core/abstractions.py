"""
Abstracciones (Protocols) del pipeline de planes de clase.

Estos protocols definen las interfaces con los colaboradores externos, para que
el core pueda testearse sin red y sin FastAPI.
"""

from __future__ import annotations

from typing import Optional, Protocol, Union

from ..domain_models import GenerationRequest, GenerationResult


class FileSource(Protocol):
    """
    Archivo elegido por el usuario y todavía no leído.

    `fastapi.UploadFile` cumple esta interfaz tal cual; para la CLI se usa
    `ingest.LocalFile`.
    """

    filename: Optional[str]
    content_type: Optional[str]

    async def read(self) -> Union[bytes, str]:
        """
        Devuelve el contenido completo: bytes crudos, o un data URL
        (`data:<mime>;base64,<payload>`) si la fuente ya viene codificada.
        """
        ...


class CompletionService(Protocol):
    """
    Servicio de completions (caja negra): request → texto | ServiceError.
    """

    async def complete(self, request: GenerationRequest) -> GenerationResult:
        """
        Envía la instrucción y las partes en orden y devuelve el texto generado.

        Raises:
            ServiceError: ante cualquier falla (red, auth, cuota, respuesta vacía).
        """
        ...
