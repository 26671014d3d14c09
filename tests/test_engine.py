import asyncio

import pytest

from conftest import FakeCompletionService, FakeUpload
from lesson_plan_core.engine import (
    Failure,
    Idle,
    LessonPlanSession,
    Loading,
    Success,
    run_lesson_plan_pipeline,
)
from lesson_plan_core.errors import (
    GENERATION_FAILED_MESSAGE,
    ReadError,
    RequestInFlightError,
    ServiceError,
    ValidationError,
)

TOPIC = "Quang hợp ở thực vật"
DURATION = "45 phút"


def test_pipeline_end_to_end(pdf_upload, fake_service):
    result = asyncio.run(
        run_lesson_plan_pipeline(topic=TOPIC, duration=DURATION, files=[pdf_upload], client=fake_service)
    )

    assert result["text"] == fake_service.text
    assert result["html"].startswith("<strong>Khởi động</strong>")
    assert "<br /><em>Hoạt động 1</em>" in result["html"]

    request = fake_service.requests[0]
    assert TOPIC in request.prompt_text and DURATION in request.prompt_text
    assert len(request.parts) == 1


@pytest.mark.parametrize("topic, with_files", [("", True), (TOPIC, False), ("", False)])
def test_validation_happens_before_any_io(topic, with_files, fake_service):
    upload = FakeUpload(filename="x.pdf", error=AssertionError("no debería leerse"))
    files = [upload] if with_files else []
    with pytest.raises(ValidationError):
        asyncio.run(run_lesson_plan_pipeline(topic=topic, duration=DURATION, files=files, client=fake_service))
    assert fake_service.requests == []


def test_one_unreadable_file_aborts_request(pdf_upload, fake_service):
    broken = FakeUpload(filename="hong.docx", error=OSError("deleted"))
    with pytest.raises(ReadError):
        asyncio.run(
            run_lesson_plan_pipeline(topic=TOPIC, duration=DURATION, files=[pdf_upload, broken], client=fake_service)
        )
    assert fake_service.requests == []


def test_session_success(pdf_upload, fake_service):
    session = LessonPlanSession(fake_service)
    assert session.state == Idle()

    state = asyncio.run(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload]))

    assert state == Success(fake_service.text)
    assert session.state is state
    assert state.to_dict()["html"].startswith("<strong>")


def test_session_is_loading_during_the_call(pdf_upload):
    seen = []

    class RecordingService(FakeCompletionService):
        async def complete(self, request):
            seen.append(session.state)
            return await super().complete(request)

    session = LessonPlanSession(RecordingService())
    asyncio.run(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload]))
    assert seen == [Loading()]


def test_failed_regeneration_clears_previous_plan(pdf_upload, fake_service):
    session = LessonPlanSession(fake_service)
    asyncio.run(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload]))

    fake_service.error = ServiceError("quota")
    state = asyncio.run(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload]))

    assert state == Failure(GENERATION_FAILED_MESSAGE, reason="service")
    assert state.to_dict() == {"status": "error", "error": GENERATION_FAILED_MESSAGE, "reason": "service"}


def test_read_error_sets_failure_without_calling_service(pdf_upload, fake_service):
    session = LessonPlanSession(fake_service)
    broken = FakeUpload(filename="hong.pdf", error=OSError("permission denied"))

    state = asyncio.run(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload, broken]))

    assert state == Failure(GENERATION_FAILED_MESSAGE, reason="read")
    assert fake_service.requests == []


def test_validation_error_keeps_previous_state(pdf_upload, fake_service):
    session = LessonPlanSession(fake_service)
    asyncio.run(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload]))
    previous = session.state

    with pytest.raises(ValidationError):
        asyncio.run(session.generate(topic="", duration=DURATION, files=[pdf_upload]))
    assert session.state is previous


def test_second_request_rejected_while_in_flight(pdf_upload):
    class SlowService(FakeCompletionService):
        async def complete(self, request):
            await release.wait()
            return await super().complete(request)

    async def scenario():
        session = LessonPlanSession(SlowService())
        first = asyncio.create_task(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload]))
        while not session.is_loading:
            await asyncio.sleep(0)

        with pytest.raises(RequestInFlightError):
            await session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload])

        release.set()
        return await first

    release = asyncio.Event()
    state = asyncio.run(scenario())
    assert isinstance(state, Success)


def test_unexpected_error_propagates_and_never_leaves_loading(pdf_upload):
    session = LessonPlanSession(FakeCompletionService(error=RuntimeError("bug")))
    with pytest.raises(RuntimeError):
        asyncio.run(session.generate(topic=TOPIC, duration=DURATION, files=[pdf_upload]))
    assert session.state == Failure(GENERATION_FAILED_MESSAGE, reason="unexpected")
