"""
lesson_plan_core
================

Núcleo del generador de kế hoạch bài giảng (planes de clase) asistido por IA.

Flujo: archivos subidos → partes codificadas → prompt → LLM → markdown liviano
→ HTML para mostrar / exportar a Word.
"""
