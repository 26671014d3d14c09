"""
API HTTP principal para lesson_plan_core.

Esta aplicación FastAPI sirve la página del generador y expone los endpoints
REST que usan el core interno (lesson_plan_core.engine).

Uso:
    uvicorn api.main:app --reload --port 8000
"""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .routes import lesson_plans, pages

# Cargar variables de entorno
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configurar logging según ambiente
log_level = getattr(logging, LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)
logger.info("🚀 Iniciando API de planes de clase")

app = FastAPI(
    title="Lesson Plan AI API",
    description="API para generar kế hoạch bài giảng asistidos por IA",
    version="0.1.0",
)

# CORS: configurar según ambiente
cors_origins_str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:8000")
cors_origins = [origin.strip() for origin in cors_origins_str.split(",") if origin.strip()]

logger.info(f"🌐 CORS origins configurados: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar rutas
app.include_router(pages.router)
app.include_router(lesson_plans.router)


@app.get("/health")
async def health():
    """Health check."""
    return {
        "status": "ok",
        "service": "lesson-plan-ai-api",
        "version": "0.1.0",
    }
