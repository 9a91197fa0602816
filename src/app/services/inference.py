"""
Inference Service: provider 호출 + 실패 분류 로깅.

- 기본: 요청당 1회 호출 (재시도 없음)
- ai.max_retries > 0 이면 ProviderUnavailable만 지수 백오프 재시도
- ProviderUnavailable / ProviderError / EmptyResponse 구분은 로그에만 남기고
  호출자에게는 InferenceFailed 하나로 올림
"""

import logging
import time

from src.app.config import AIConfig
from src.app.providers.base import InferenceProvider, ProviderFailure, ProviderUnavailable
from src.app.providers.gemini import GeminiProvider
from src.domain.errors import ErrorCodes, InferenceFailed
from src.domain.schemas import InferenceRequest, InferenceResult
from src.utils.retry import retry_with_exponential_backoff

logger = logging.getLogger(__name__)


class InferenceService:
    """
    Inference 서비스.

    Usage:
        service = InferenceService(GeminiProvider(api_key="..."))
        result = await service.generate(request)
    """

    def __init__(
        self,
        provider: InferenceProvider,
        max_retries: int = 0,
        retry_initial_delay: float = 1.0,
    ):
        """
        Args:
            provider: Inference Provider
            max_retries: ProviderUnavailable 재시도 횟수 (0 = 재시도 없음)
            retry_initial_delay: 첫 재시도 대기 시간(초)
        """
        self.provider = provider
        self.max_retries = max_retries
        self.retry_initial_delay = retry_initial_delay

    @classmethod
    def from_config(cls, ai_config: AIConfig) -> "InferenceService":
        """config 기반 Gemini provider 생성."""
        provider = GeminiProvider(
            api_key=ai_config.api_key,
            model=ai_config.model,
            timeout=ai_config.timeout,
        )
        return cls(
            provider,
            max_retries=ai_config.max_retries,
            retry_initial_delay=ai_config.retry_initial_delay,
        )

    async def generate(self, request: InferenceRequest) -> InferenceResult:
        """
        답변 생성.

        Raises:
            InferenceFailed: provider 실패 (원인은 context["cause"])
        """
        started = time.monotonic()

        try:
            if self.max_retries > 0:
                result = await retry_with_exponential_backoff(
                    self.provider.generate,
                    request,
                    max_retries=self.max_retries,
                    initial_delay=self.retry_initial_delay,
                    exceptions=(ProviderUnavailable,),
                )
            else:
                result = await self.provider.generate(request)

        except ProviderFailure as e:
            logger.error(
                f"Inference failed: cause={e.code} provider={self.provider.name} "
                f"model={self.provider.model} message={e.message} "
                f"context={e.context}",
                exc_info=True,
            )
            raise InferenceFailed(
                ErrorCodes.INFERENCE_FAILED,
                e.message,
                cause=e.code,
            ) from e

        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.info(
            f"Inference succeeded: provider={self.provider.name} "
            f"model={result.model} chars={len(result.answer_text)} "
            f"elapsed_ms={elapsed_ms}"
        )
        return result
