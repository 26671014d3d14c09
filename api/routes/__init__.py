"""Rutas de la API."""

from . import lesson_plans, pages

__all__ = ["lesson_plans", "pages"]
