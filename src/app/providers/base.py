"""
AI Provider 추상 인터페이스.

- Provider는 요청 1건당 정확히 1회 호출
- 실패는 세 가지로 분류해서 올림 (사용자에게는 구분하지 않지만 로그에는 남김):
  - ProviderUnavailable: 네트워크/연결 실패, 타임아웃
  - ProviderError: provider가 비정상 상태 반환 (인증, 쿼터, 잘못된 요청, 모델 오류)
  - EmptyResponse: 호출은 성공했지만 추출할 텍스트 없음
"""

from abc import ABC, abstractmethod
from typing import Any

from src.domain.errors import ErrorCodes
from src.domain.schemas import InferenceRequest, InferenceResult

# =============================================================================
# Provider Exceptions
# =============================================================================


class ProviderFailure(Exception):
    """Provider 관련 에러 공통 베이스."""

    default_code = ErrorCodes.PROVIDER_ERROR

    def __init__(self, message: str, code: str | None = None, **context: Any) -> None:
        self.code = code or self.default_code
        self.message = message
        self.context = context
        super().__init__(f"[{self.code}] {message}")


class ProviderUnavailable(ProviderFailure):
    """Provider에 도달하지 못함 (연결 실패, 타임아웃, 5xx unavailable)."""

    default_code = ErrorCodes.PROVIDER_UNAVAILABLE


class ProviderError(ProviderFailure):
    """Provider가 요청을 거절하거나 모델 오류를 반환."""

    default_code = ErrorCodes.PROVIDER_ERROR


class EmptyResponse(ProviderFailure):
    """성공 응답이지만 텍스트가 비어 있음."""

    default_code = ErrorCodes.EMPTY_RESPONSE


# =============================================================================
# Abstract Provider
# =============================================================================


class InferenceProvider(ABC):
    """
    Inference Provider 추상 인터페이스.

    역할: 지시문 + inline 파일 → 답변 텍스트 (재시도/판정 권한 없음)
    """

    name: str = "base"
    model: str | None = None

    @abstractmethod
    async def generate(self, request: InferenceRequest) -> InferenceResult:
        """
        요청 1건 전송 후 답변 추출.

        Args:
            request: 지시문 + inline 파일

        Returns:
            InferenceResult

        Raises:
            ProviderUnavailable | ProviderError | EmptyResponse
        """
        ...
