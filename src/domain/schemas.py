"""
Data schemas for the document-query pipeline.

모든 엔티티는 요청 단위(request-scoped):
- 요청 진입 시 생성, 응답 후 폐기 (저장하지 않음)
- 요청 간 공유 없음 → 락 불필요
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UploadedArtifact:
    """
    업로드된 파일 원본.

    content는 비어 있어도 됨 (파일 자체가 없는 경우만 검증 실패).
    """
    content: bytes
    media_type: str
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class InlineData:
    """Provider inline 표현: base64 텍스트 + MIME 타입."""
    data: str
    mime_type: str


@dataclass(frozen=True)
class InferenceRequest:
    """
    추론 요청 1건.

    매 호출마다 새로 생성, 생성 후 변경 금지.
    """
    preamble: str
    question: str
    artifact: InlineData

    def parts(self) -> list[str | InlineData]:
        """Provider 전달 순서: 지시문 먼저, 파일 나중 (순서 중요)."""
        return [self.preamble, self.artifact]


@dataclass
class InferenceResult:
    """Provider 응답에서 추출한 답변."""
    answer_text: str
    model: str | None = None
    finish_reason: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result = {
            "answer_text": self.answer_text,
            "model": self.model,
            "finish_reason": self.finish_reason,
            "metadata": self.metadata or None,
        }
        # None 값 제거
        return {k: v for k, v in result.items() if v is not None}
