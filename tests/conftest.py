"""
Fakes compartidos por los tests: uploads en memoria y servicio de IA sin red.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

import pytest

from lesson_plan_core.domain_models import GenerationRequest, GenerationResult


@dataclass
class FakeUpload:
    """Mismo contrato que `fastapi.UploadFile` (filename, content_type, read)."""

    filename: Optional[str]
    content: Union[bytes, str] = b""
    content_type: Optional[str] = None
    error: Optional[Exception] = None

    async def read(self) -> Union[bytes, str]:
        if self.error is not None:
            raise self.error
        return self.content


@dataclass
class FakeCompletionService:
    text: str = "**Khởi động** (5 phút)\n*Hoạt động 1*"
    error: Optional[Exception] = None
    requests: List[GenerationRequest] = field(default_factory=list)

    async def complete(self, request: GenerationRequest) -> GenerationResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return GenerationResult(raw_text=self.text)


@pytest.fixture
def pdf_upload():
    return FakeUpload(filename="sgk-sinh-hoc.pdf", content=b"%PDF-1.4 fake", content_type="application/pdf")


@pytest.fixture
def fake_service():
    return FakeCompletionService()
