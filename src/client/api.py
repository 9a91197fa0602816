"""
/read-file HTTP 클라이언트.

전송 실패, 비정상 status, 잘못된 응답 본문은 모두 ReadFileError로 감싼다.
(폼 컨트롤러는 원인을 구분하지 않고 하나의 실패 문구만 보여줌)
"""

import logging
from typing import Any

import httpx

from src.client.controller import SelectedFile
from src.domain.errors import DocumentQueryError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:3000"
DEFAULT_CLIENT_TIMEOUT = 120.0


class ReadFileError(DocumentQueryError):
    """서버 호출 실패."""

    NETWORK_ERROR = "NETWORK_ERROR"
    HTTP_STATUS = "HTTP_STATUS"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


class ReadFileClient:
    """
    Usage:
        client = ReadFileClient("http://localhost:3000")
        text = await client.read_file(selected_file, "What was Q3 revenue?")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        timeout: float = DEFAULT_CLIENT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            base_url: 서버 URL
            timeout: 요청 타임아웃(초). 서버의 provider 타임아웃보다 길게
            transport: 테스트용 transport (MockTransport, ASGITransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def read_file(self, file: SelectedFile, question: str) -> str:
        """파일 + 질문 전송 → generatedText."""
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.post(
                    "/read-file",
                    files={"file": (file.filename, file.content, file.media_type)},
                    data={"question": question},
                )
            except httpx.HTTPError as e:
                raise ReadFileError(
                    ReadFileError.NETWORK_ERROR,
                    f"Could not reach {self.base_url}: {e}",
                ) from e

        if response.status_code != 200:
            raise ReadFileError(
                ReadFileError.HTTP_STATUS,
                self._error_detail(response),
                status_code=response.status_code,
            )

        try:
            body: Any = response.json()
        except ValueError as e:
            raise ReadFileError(
                ReadFileError.MALFORMED_RESPONSE,
                "Response body is not JSON",
            ) from e

        text = body.get("generatedText") if isinstance(body, dict) else None
        if not isinstance(text, str):
            raise ReadFileError(
                ReadFileError.MALFORMED_RESPONSE,
                "Response has no generatedText",
            )
        return text

    def _error_detail(self, response: httpx.Response) -> str:
        """서버 에러 본문 {"error": ...} 추출 (없으면 status)."""
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            return str(body["error"])
        return f"HTTP {response.status_code}"
