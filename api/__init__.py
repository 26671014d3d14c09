"""
API HTTP para lesson_plan_core.

Esta capa expone la página del formulario y los endpoints REST que usan el
core interno (lesson_plan_core.engine) para generar y exportar planes de clase.
"""
