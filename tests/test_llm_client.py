import asyncio
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from lesson_plan_core import llm_client
from lesson_plan_core.config import Settings
from lesson_plan_core.domain_models import EncodedPart, GenerationRequest
from lesson_plan_core.errors import ServiceError
from lesson_plan_core.llm_client import CompletionClient, build_message_content


class _FakeCompletions:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def _fake_openai(response=None, error=None):
    return SimpleNamespace(chat=SimpleNamespace(completions=_FakeCompletions(response, error)))


def _response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


REQUEST = GenerationRequest(
    prompt_text="Soạn giáo án",
    parts=(
        EncodedPart(mime_type="application/pdf", base64_data="JVBERi0x"),
        EncodedPart(mime_type="image/png", base64_data="iVBOR"),
        EncodedPart(mime_type="text/plain", base64_data="aGVsbG8="),
    ),
)


def test_message_content_order_and_shapes():
    content = build_message_content(REQUEST)

    assert content[0] == {"type": "text", "text": "Soạn giáo án"}
    assert content[1]["type"] == "file"
    assert content[1]["file"]["file_data"] == "data:application/pdf;base64,JVBERi0x"
    assert content[1]["file"]["filename"] == "tai-lieu-1.pdf"
    assert content[2] == {"type": "image_url", "image_url": {"url": "data:image/png;base64,iVBOR"}}
    assert content[3]["type"] == "text"
    assert content[3]["text"].endswith("hello")


def test_complete_returns_text():
    fake = _fake_openai(response=_response("**Khởi động**"))
    client = CompletionClient(client=fake, model="test-model")

    result = asyncio.run(client.complete(REQUEST))

    assert result.raw_text == "**Khởi động**"
    call = fake.chat.completions.calls[0]
    assert call["model"] == "test-model"
    assert call["messages"][0]["role"] == "user"
    assert len(call["messages"][0]["content"]) == 1 + len(REQUEST.parts)


def test_api_error_becomes_service_error():
    client = CompletionClient(client=_fake_openai(error=OpenAIError("quota")), model="m")
    with pytest.raises(ServiceError):
        asyncio.run(client.complete(REQUEST))


@pytest.mark.parametrize("response", [_response(""), _response("   "), _response(None), SimpleNamespace(choices=[])])
def test_empty_or_malformed_response_is_service_error(response):
    client = CompletionClient(client=_fake_openai(response=response), model="m")
    with pytest.raises(ServiceError):
        asyncio.run(client.complete(REQUEST))


def test_missing_api_key_is_fatal(monkeypatch):
    monkeypatch.setattr(
        llm_client,
        "get_settings",
        lambda: Settings(openai_api_key="", openai_model_text="gpt-4.1-mini"),
    )
    with pytest.raises(RuntimeError):
        CompletionClient()
