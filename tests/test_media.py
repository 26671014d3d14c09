import asyncio
import base64

import pytest

from conftest import FakeUpload
from lesson_plan_core.errors import ReadError
from lesson_plan_core.media import (
    DEFAULT_MIME_TYPE,
    encode_file,
    encode_files,
    strip_data_url_prefix,
)


def test_encode_file_base64_and_mime(pdf_upload):
    part = asyncio.run(encode_file(pdf_upload))
    assert part.mime_type == "application/pdf"
    assert part.base64_data == base64.b64encode(b"%PDF-1.4 fake").decode("ascii")


def test_encode_file_is_idempotent(pdf_upload):
    first = asyncio.run(encode_file(pdf_upload))
    second = asyncio.run(encode_file(pdf_upload))
    assert first == second


def test_mime_guessed_from_filename():
    upload = FakeUpload(filename="ghi-chu.txt", content=b"hello", content_type=None)
    part = asyncio.run(encode_file(upload))
    assert part.mime_type == "text/plain"


def test_mime_falls_back_to_octet_stream():
    upload = FakeUpload(filename="khong-duoi", content=b"\x00\x01", content_type=None)
    part = asyncio.run(encode_file(upload))
    assert part.mime_type == DEFAULT_MIME_TYPE


def test_data_url_prefix_is_stripped():
    upload = FakeUpload(
        filename="a.txt",
        content="data:text/plain;base64,aGVsbG8=",
        content_type="text/plain",
    )
    part = asyncio.run(encode_file(upload))
    assert part.base64_data == "aGVsbG8="


def test_strip_data_url_prefix_leaves_plain_payload():
    assert strip_data_url_prefix("aGVsbG8=") == "aGVsbG8="
    assert strip_data_url_prefix("data:image/png;base64,iVBOR") == "iVBOR"


def test_read_failure_becomes_read_error():
    upload = FakeUpload(filename="da-xoa.pdf", error=OSError("No such file"))
    with pytest.raises(ReadError) as exc_info:
        asyncio.run(encode_file(upload))
    assert isinstance(exc_info.value.__cause__, OSError)


def test_invalid_base64_string_is_read_error():
    upload = FakeUpload(filename="x.txt", content="data:text/plain;base64,@@@", content_type="text/plain")
    with pytest.raises(ReadError):
        asyncio.run(encode_file(upload))


def test_encode_files_keeps_order():
    uploads = [
        FakeUpload(filename="1.txt", content=b"one", content_type="text/plain"),
        FakeUpload(filename="2.png", content=b"two", content_type="image/png"),
    ]
    parts = asyncio.run(encode_files(uploads))
    assert [p.mime_type for p in parts] == ["text/plain", "image/png"]
    assert [base64.b64decode(p.base64_data) for p in parts] == [b"one", b"two"]


def test_encode_files_fails_whole_batch(pdf_upload):
    broken = FakeUpload(filename="hong.docx", error=PermissionError("denied"))
    with pytest.raises(ReadError):
        asyncio.run(encode_files([pdf_upload, broken]))
