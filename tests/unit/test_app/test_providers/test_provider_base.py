"""
test_provider_base.py - Provider 기본 클래스 테스트

- 실패 분류별 기본 코드
- InferenceProvider 추상 메서드 강제
"""

import pytest

from src.app.providers.base import (
    EmptyResponse,
    InferenceProvider,
    ProviderError,
    ProviderFailure,
    ProviderUnavailable,
)
from src.domain.errors import ErrorCodes


class TestProviderExceptions:
    """Provider 예외 테스트."""

    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (ProviderUnavailable, ErrorCodes.PROVIDER_UNAVAILABLE),
            (ProviderError, ErrorCodes.PROVIDER_ERROR),
            (EmptyResponse, ErrorCodes.EMPTY_RESPONSE),
        ],
    )
    def test_default_codes(self, cls, code):
        error = cls("message")

        assert error.code == code
        assert isinstance(error, ProviderFailure)

    def test_message_and_context(self):
        error = ProviderError("quota exceeded", model="gemini-1.5-flash")

        assert error.message == "quota exceeded"
        assert error.context == {"model": "gemini-1.5-flash"}
        assert str(error) == "[PROVIDER_ERROR] quota exceeded"

    def test_code_override(self):
        error = ProviderError("x", code="CUSTOM")

        assert error.code == "CUSTOM"


class TestInferenceProvider:
    """추상 인터페이스 테스트."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            InferenceProvider()  # type: ignore[abstract]
