"""
Общие фикстуры тестов клиента OCR.space.

Сеть не используется: транспорт подменяется httpx.MockTransport,
который записывает все отправленные запросы.
"""

import json

import httpx
import pytest

from ocr_space import AsyncOCRSpaceClient, OCRSpaceClient

API_KEY = "test-key"
ENDPOINT = "https://ocr.example.test/parse/image"


SUCCESS_BODY = {
    "ParsedResults": [
        {
            "TextOverlay": {
                "Lines": [
                    {
                        "Words": [
                            {"WordText": "foo", "Left": 10, "Top": 12, "Height": 8, "Width": 30},
                        ],
                        "MaxHeight": 8,
                        "MinTop": 12,
                    }
                ],
                "HasOverlay": True,
                "Message": "Total lines: 1",
            },
            "TextOrientation": "0",
            "FileParseExitCode": 1,
            "ParsedText": "foo ",
            "ErrorMessage": "",
            "ErrorDetails": "",
        },
        {
            "TextOverlay": {"Lines": [], "HasOverlay": False, "Message": "Text overlay is not provided"},
            "TextOrientation": "0",
            "FileParseExitCode": 1,
            "ParsedText": "bar",
            "ErrorMessage": "",
            "ErrorDetails": "",
        },
    ],
    "OCRExitCode": 1,
    "IsErroredOnProcessing": False,
    "ProcessingTimeInMilliseconds": "312",
    "SearchablePDFURL": "Searchable PDF not generated as it was not requested.",
}


class RecordingTransport:
    """
    Обёртка над MockTransport, запоминающая запросы.

    Attributes:
        requests: все запросы в порядке отправки
    """

    def __init__(self, status_code: int = 200, body=None, content: bytes = None, error=None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._content = content if content is not None else json.dumps(
            SUCCESS_BODY if body is None else body
        ).encode()
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error(f"simulated {self._error.__name__}", request=request)
        return httpx.Response(
            self._status_code,
            content=self._content,
            headers={"Content-Type": "application/json"},
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


def make_client(recorder: RecordingTransport, **kwargs) -> OCRSpaceClient:
    http_client = httpx.Client(transport=httpx.MockTransport(recorder.handler))
    return OCRSpaceClient(api_key=API_KEY, url=ENDPOINT, http_client=http_client, **kwargs)


def make_async_client(recorder: RecordingTransport, **kwargs) -> AsyncOCRSpaceClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder.handler))
    return AsyncOCRSpaceClient(api_key=API_KEY, url=ENDPOINT, http_client=http_client, **kwargs)


@pytest.fixture
def client(recorder: RecordingTransport) -> OCRSpaceClient:
    return make_client(recorder)


@pytest.fixture
def scan_file(tmp_path):
    path = tmp_path / "scan.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake image bytes")
    return path
