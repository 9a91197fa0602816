"""
test_document_query_flow.py - 폼 → HTTP → 서버 → provider 통합 테스트

검증 포인트:
- FormController + ReadFileClient가 ASGI 앱을 직접 호출 (네트워크 없음)
- provider가 받은 요청: 지시문에 질문 포함, 파일은 base64 원본
- 서버 500 → 폼은 단일 실패 문구
"""

import base64

import httpx
import pytest

from src.app.providers.base import EmptyResponse, ProviderError, ProviderUnavailable
from src.client.api import ReadFileClient
from src.client.controller import FormController, RequestStatus, SelectedFile
from src.domain.constants import CLIENT_FAILURE_MESSAGE

pytestmark = pytest.mark.integration


@pytest.fixture
def read_file_client(app) -> ReadFileClient:
    return ReadFileClient("http://testserver", transport=httpx.ASGITransport(app=app))


@pytest.fixture
def controller(read_file_client: ReadFileClient) -> FormController:
    return FormController(read_file_client.read_file)


class TestDocumentQueryFlow:
    """전체 흐름."""

    @pytest.mark.asyncio
    async def test_success(self, controller, stub_provider, sample_csv_file, sample_csv_bytes):
        stub_provider.answer = "**Q3** had the highest revenue.\n* Q3: 150\n"
        controller.select_file(SelectedFile.from_path(sample_csv_file))
        controller.set_question("Which quarter had the highest revenue?")

        state = await controller.submit()

        assert state.status == RequestStatus.SUCCESS
        assert state.answer_html == (
            "<strong>Q3</strong> had the highest revenue.<br />* Q3: 150<br />"
        )

        assert stub_provider.call_count == 1
        request = stub_provider.requests[0]
        assert "Which quarter had the highest revenue?" in request.preamble
        assert request.artifact.mime_type == "text/csv"
        assert base64.b64decode(request.artifact.data) == sample_csv_bytes

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            ProviderUnavailable("Service unavailable"),
            ProviderError("Invalid argument"),
            EmptyResponse("No text"),
        ],
    )
    async def test_provider_failure(self, controller, stub_provider, sample_csv_file, error):
        stub_provider.error = error
        controller.select_file(SelectedFile.from_path(sample_csv_file))
        controller.set_question("Q?")

        state = await controller.submit()

        assert state.status == RequestStatus.FAILED
        assert state.error == CLIENT_FAILURE_MESSAGE
        assert stub_provider.call_count == 1

    @pytest.mark.asyncio
    async def test_retry_after_failure(self, controller, stub_provider, sample_csv_file):
        """실패 후 같은 입력으로 재제출."""
        stub_provider.error = ProviderUnavailable("down")
        controller.select_file(SelectedFile.from_path(sample_csv_file))
        controller.set_question("Q?")

        failed = await controller.submit()
        stub_provider.error = None
        succeeded = await controller.submit()

        assert failed.status == RequestStatus.FAILED
        assert succeeded.status == RequestStatus.SUCCESS
        assert succeeded.answer_html == "stub answer"
        assert stub_provider.call_count == 2


class TestServerContract:
    """HTTP 레벨 계약 (ReadFileClient 없이)."""

    @pytest.mark.asyncio
    async def test_missing_file_never_calls_provider(self, app, stub_provider):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.post("/read-file", data={"question": "Q?"})

        assert response.status_code == 400
        assert response.json() == {"error": "File is required"}
        assert stub_provider.call_count == 0

    @pytest.mark.asyncio
    async def test_failure_body_is_fixed(self, app, stub_provider, sample_csv_bytes):
        stub_provider.error = ProviderError("secret upstream detail")
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.post(
                "/read-file",
                files={"file": ("revenue.csv", sample_csv_bytes, "text/csv")},
                data={"question": "Q?"},
            )

        assert response.status_code == 500
        assert response.json() == {"error": "An error occurred while generating content"}
        assert "secret" not in response.text
