"""
test_client_api.py - ReadFileClient 테스트 (httpx.MockTransport)
"""

import json

import httpx
import pytest

from src.client.api import ReadFileClient, ReadFileError
from src.client.controller import SelectedFile


@pytest.fixture
def csv_file(sample_csv_bytes: bytes) -> SelectedFile:
    return SelectedFile("revenue.csv", sample_csv_bytes, "text/csv")


def _client(handler) -> ReadFileClient:
    return ReadFileClient("http://arvis.test/", transport=httpx.MockTransport(handler))


class TestReadFile:
    """read_file 메서드 테스트."""

    @pytest.mark.asyncio
    async def test_success(self, csv_file, sample_csv_bytes):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"generatedText": "**Q3** led."})

        text = await _client(handler).read_file(csv_file, "Which quarter led?")

        assert text == "**Q3** led."
        request = seen[0]
        assert request.method == "POST"
        assert request.url == "http://arvis.test/read-file"
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.read()
        assert b'name="file"; filename="revenue.csv"' in body
        assert b'name="question"' in body
        assert b"Which quarter led?" in body
        assert sample_csv_bytes in body

    @pytest.mark.asyncio
    async def test_server_error(self, csv_file):
        def handler(request):
            return httpx.Response(
                500, json={"error": "An error occurred while generating content"}
            )

        with pytest.raises(ReadFileError) as exc_info:
            await _client(handler).read_file(csv_file, "Q?")

        assert exc_info.value.code == ReadFileError.HTTP_STATUS
        assert exc_info.value.message == "An error occurred while generating content"
        assert exc_info.value.context["status_code"] == 500

    @pytest.mark.asyncio
    async def test_error_without_json_body(self, csv_file):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ReadFileError) as exc_info:
            await _client(handler).read_file(csv_file, "Q?")

        assert exc_info.value.message == "HTTP 502"

    @pytest.mark.asyncio
    async def test_network_error(self, csv_file):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(ReadFileError) as exc_info:
            await _client(handler).read_file(csv_file, "Q?")

        assert exc_info.value.code == ReadFileError.NETWORK_ERROR
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [b"not json", json.dumps({"text": "wrong key"}).encode(), b"[1, 2]"],
    )
    async def test_malformed_response(self, csv_file, content):
        def handler(request):
            return httpx.Response(200, content=content)

        with pytest.raises(ReadFileError) as exc_info:
            await _client(handler).read_file(csv_file, "Q?")

        assert exc_info.value.code == ReadFileError.MALFORMED_RESPONSE
