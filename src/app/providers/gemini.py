"""
Google Gemini Inference Provider.

예외 분류 정책:
- UNAVAILABLE_ERRORS: ServiceUnavailable, DeadlineExceeded, RetryError,
  ConnectionError, TimeoutError → ProviderUnavailable
- 그 외 GoogleAPICallError (InvalidArgument, PermissionDenied, Unauthenticated,
  ResourceExhausted, NotFound ...) → ProviderError
- 응답 텍스트 없음 → EmptyResponse

Fallback 모델 없음: 요청당 1회 호출이 전체 계약.
"""

import asyncio
import base64
import logging
from typing import Any

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from src.domain.constants import DEFAULT_MODEL, DEFAULT_TIMEOUT_SECONDS
from src.domain.errors import ConfigError, ErrorCodes
from src.domain.schemas import InferenceRequest, InferenceResult, InlineData

from .base import EmptyResponse, InferenceProvider, ProviderError, ProviderUnavailable

logger = logging.getLogger(__name__)

# =============================================================================
# Exception Mapping
# =============================================================================

# Provider에 도달하지 못한 경우 (gRPC UNAVAILABLE 포함)
UNAVAILABLE_ERRORS: tuple[type[BaseException], ...] = (
    google_exceptions.ServiceUnavailable,  # 503 / 연결 실패
    google_exceptions.DeadlineExceeded,    # 504
    google_exceptions.RetryError,          # transport 재시도 소진
    ConnectionError,
    TimeoutError,                          # asyncio.wait_for 포함
)

# Provider가 비정상 상태를 반환한 경우
PROVIDER_ERRORS: tuple[type[BaseException], ...] = (
    google_exceptions.GoogleAPICallError,
)


class GeminiProvider(InferenceProvider):
    """
    Gemini Provider.

    Usage:
        provider = GeminiProvider(api_key=config.ai.api_key, model="gemini-1.5-flash")
        result = await provider.generate(request)
    """

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Args:
            api_key: API 키 (config에서 주입, 환경변수 직접 조회 안 함)
            model: 모델 ID (config에서 주입)
            timeout: 호출 타임아웃(초). None이면 무제한

        Raises:
            ConfigError: API 키가 없을 때 (fail-fast)
        """
        if not api_key:
            raise ConfigError(
                ErrorCodes.MISSING_CREDENTIAL,
                "Gemini API key is required",
            )
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client: Any = None

    def _get_client(self) -> Any:
        """Gemini 클라이언트 (lazy init, 프로세스당 1회 configure)."""
        if self._client is None:
            genai.configure(api_key=self.api_key)
            self._client = genai
        return self._client

    async def generate(self, request: InferenceRequest) -> InferenceResult:
        """
        지시문 + 파일로 답변 생성.

        재시도 없음. 실패는 분류해서 그대로 올린다.
        """
        try:
            response = await self._call_api(request)

        except UNAVAILABLE_ERRORS as e:
            raise ProviderUnavailable(
                self._describe_error(e),
                model=self.model,
                error_type=type(e).__name__,
            ) from e

        except PROVIDER_ERRORS as e:
            raise ProviderError(
                self._describe_error(e),
                model=self.model,
                error_type=type(e).__name__,
            ) from e

        except Exception as e:
            # 기타 예외 (SDK 내부 오류, 잘못된 응답 형식 등)
            logger.error(f"Gemini call failed with unexpected error: {e}", exc_info=True)
            raise ProviderError(
                self._describe_error(e),
                model=self.model,
                error_type=type(e).__name__,
            ) from e

        text = self._extract_text(response)
        return InferenceResult(
            answer_text=text,
            model=self.model,
            finish_reason=self._finish_reason(response),
        )

    async def _call_api(self, request: InferenceRequest) -> Any:
        """실제 Gemini API 호출."""
        client = self._get_client()
        model_instance = client.GenerativeModel(self.model)

        contents = [
            self._to_blob(part) if isinstance(part, InlineData) else part
            for part in request.parts()
        ]

        call = model_instance.generate_content_async(contents)
        if self.timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=self.timeout)

    def _to_blob(self, inline: InlineData) -> dict[str, Any]:
        """InlineData → SDK blob. SDK는 raw bytes를 받아 직접 인코딩한다."""
        return {
            "mime_type": inline.mime_type,
            "data": base64.b64decode(inline.data),
        }

    def _extract_text(self, response: Any) -> str:
        """응답에서 텍스트 추출. 없으면 EmptyResponse."""
        try:
            text = response.text
        except ValueError as e:
            # candidates 없음 / safety block 시 SDK가 ValueError 발생
            raise EmptyResponse(
                f"Gemini returned no text: {e}",
                model=self.model,
            ) from e

        if not text or not text.strip():
            raise EmptyResponse("Gemini returned an empty answer", model=self.model)

        return str(text)

    def _finish_reason(self, response: Any) -> str | None:
        candidates = getattr(response, "candidates", None)
        if not candidates:
            return None
        reason = getattr(candidates[0], "finish_reason", None)
        name = getattr(reason, "name", None)
        return name if isinstance(name, str) else None

    def _describe_error(self, error: BaseException) -> str:
        """로그용 에러 설명 생성."""
        if isinstance(error, TimeoutError):
            return f"Gemini call timed out after {self.timeout}s"
        if isinstance(error, google_exceptions.Unauthenticated):
            return "Gemini authentication failed. Check the API key."
        if isinstance(error, google_exceptions.PermissionDenied):
            return "Gemini API key lacks permission for this model."
        if isinstance(error, google_exceptions.ResourceExhausted):
            return "Gemini quota or rate limit exceeded."
        if isinstance(error, google_exceptions.InvalidArgument):
            return "Gemini rejected the request. Check the file type and size."
        if isinstance(error, google_exceptions.NotFound):
            return f"Gemini model not found: {self.model}"
        if isinstance(error, google_exceptions.ServiceUnavailable):
            return "Gemini service is temporarily unavailable."
        if isinstance(error, ConnectionError):
            return "Network error while contacting Gemini."

        return f"Gemini call failed: {error}"
