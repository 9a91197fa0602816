"""
Error definitions for the document-query pipeline.

전파 규칙:
- 검증 실패(ValidationError) → 외부 호출 전에 즉시 중단
- 추론 실패(InferenceFailed) → orchestrator 경계에서 단일 500 응답으로 매핑
- 설정 실패(ConfigError) → 요청 시점이 아니라 기동 시점에 발생
"""

from typing import Any


class DocumentQueryError(Exception):
    """
    파이프라인 에러의 공통 베이스.

    code는 로그/테스트용 식별자, message는 사람이 읽는 설명.

    Usage:
        raise ValidationError(ErrorCodes.FILE_REQUIRED, "File is required")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        base = f"[{self.code}] {self.message}"
        return f"{base} ({ctx_str})" if ctx_str else base

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ValidationError(DocumentQueryError):
    """파일/질문 누락 등 입력 검증 실패. 사용자가 입력을 고쳐 재시도 가능."""


class InferenceFailed(DocumentQueryError):
    """
    Provider 호출 실패.

    세부 원인(unavailable / provider error / empty response)은
    context["cause"]에 남기고, 사용자에게는 구분하지 않는다.
    """


class ConfigError(DocumentQueryError):
    """기동 시점 설정 오류 (API 키 누락 등)."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Validation ===
    FILE_REQUIRED = "FILE_REQUIRED"
    QUESTION_REQUIRED = "QUESTION_REQUIRED"
    UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"  # client-side filter

    # === Inference ===
    INFERENCE_FAILED = "INFERENCE_FAILED"
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"

    # === Config ===
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    INVALID_CONFIG = "INVALID_CONFIG"
