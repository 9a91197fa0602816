"""
Application Services.

역할:
- normalize: 업로드 바이트 → base64 inline 표현
- prompt: 질문 → 지시문 + InferenceRequest
- inference: provider 호출, 실패 분류
- formatter: 답변 → 표시용 markup
- query: 위 단계를 요청 1건 단위로 실행
"""

from .formatter import format_answer
from .inference import InferenceService
from .normalize import guess_media_type, normalize_artifact
from .prompt import build_inference_request, build_preamble
from .query import DocumentQueryService

__all__ = [
    "normalize_artifact",
    "guess_media_type",
    "build_preamble",
    "build_inference_request",
    "InferenceService",
    "format_answer",
    "DocumentQueryService",
]
