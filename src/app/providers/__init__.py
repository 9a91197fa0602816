"""
AI Provider Abstraction.

단일 provider(Gemini). 모델명은 config만 SSOT.
"""

from .base import (
    EmptyResponse,
    InferenceProvider,
    ProviderError,
    ProviderFailure,
    ProviderUnavailable,
)
from .gemini import GeminiProvider

__all__ = [
    "InferenceProvider",
    "ProviderFailure",
    "ProviderUnavailable",
    "ProviderError",
    "EmptyResponse",
    "GeminiProvider",
]
