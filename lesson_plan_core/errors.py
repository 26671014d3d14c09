"""
lesson_plan_core.errors
=======================

Taxonomía de errores del pipeline.

Cada error lleva el mensaje fijo que ve el docente (`user_message`); el detalle
técnico queda en `str(exc)` y en el log.
"""

VALIDATION_MESSAGE = "Vui lòng nhập chủ đề và chọn ít nhất một tệp tài liệu."
GENERATION_FAILED_MESSAGE = "Đã xảy ra lỗi khi tạo kế hoạch. Vui lòng thử lại."
IN_FLIGHT_MESSAGE = "Đang tạo kế hoạch, vui lòng chờ..."


class LessonPlanError(Exception):
    """Base de todos los errores del pipeline."""

    user_message = GENERATION_FAILED_MESSAGE


class ValidationError(LessonPlanError):
    """Falta el tema o no hay archivos. Se detecta antes de cualquier IO."""

    user_message = VALIDATION_MESSAGE


class ReadError(LessonPlanError):
    """No se pudo leer/codificar alguno de los archivos del lote."""


class ServiceError(LessonPlanError):
    """Falla del servicio de completions (red, auth, cuota, respuesta vacía o malformada)."""


class RequestInFlightError(LessonPlanError):
    """Ya hay una generación en curso; no se admite una segunda hasta que termine."""

    user_message = IN_FLIGHT_MESSAGE
