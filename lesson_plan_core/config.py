# lesson_plan_core/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
lesson_plan_core.config
=======================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- Si `OPENAI_API_KEY` no está presente, el error se lanza donde se construye
  el cliente del LLM, no acá.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global de la aplicación.

    Attributes
    ----------
    openai_api_key:
        API key de OpenAI. Requerida para generar planes.
    openai_model_text:
        Modelo usado para generar el plan a partir del prompt + documentos.
    input_dir:
        Directorio donde la CLI busca los documentos de referencia.
    output_dir:
        Directorio donde la CLI escribe el .docx exportado.
    """

    openai_api_key: str
    openai_model_text: str

    # I/O (solo CLI)
    input_dir: str = "input"
    output_dir: str = "output"


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - OPENAI_API_KEY
    - OPENAI_MODEL_TEXT (default: "gpt-4.1-mini")
    - INPUT_DIR (default: "input")
    - OUTPUT_DIR (default: "output")
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model_text=os.getenv(
            "OPENAI_MODEL_TEXT",
            "gpt-4.1-mini"
        ),
        input_dir=os.getenv("INPUT_DIR", "input"),
        output_dir=os.getenv("OUTPUT_DIR", "output"),
    )
