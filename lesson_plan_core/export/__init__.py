from __future__ import annotations

from .docx_html import DOCX_MEDIA_TYPE, DocExport, build_doc_export, lesson_plan_filename

__all__ = ["DOCX_MEDIA_TYPE", "DocExport", "build_doc_export", "lesson_plan_filename"]
