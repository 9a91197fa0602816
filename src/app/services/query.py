"""
Document Query Service: 요청 1건의 파이프라인 순서 관리.

file + question → normalize → prompt → inference → 답변 원문

- 검증 실패는 외부 호출 전에 중단
- 부분 성공 없음 (전부 아니면 실패)
"""

import logging

from src.app.services.inference import InferenceService
from src.app.services.normalize import normalize_artifact
from src.app.services.prompt import build_inference_request, require_question
from src.domain.constants import FILE_REQUIRED_MESSAGE
from src.domain.errors import ErrorCodes, ValidationError
from src.domain.schemas import InferenceResult, UploadedArtifact

logger = logging.getLogger(__name__)


class DocumentQueryService:
    """문서 질의 서비스 (요청 간 상태 없음)."""

    def __init__(self, inference: InferenceService):
        self.inference = inference

    async def answer(
        self,
        artifact: UploadedArtifact | None,
        question: str | None,
    ) -> InferenceResult:
        """
        파일에 대한 질문에 답변.

        Args:
            artifact: 업로드 파일 (None이면 검증 실패)
            question: 사용자 질문 (비어 있으면 검증 실패)

        Returns:
            InferenceResult

        Raises:
            ValidationError: 파일/질문 누락
            InferenceFailed: provider 실패
        """
        if artifact is None:
            raise ValidationError(ErrorCodes.FILE_REQUIRED, FILE_REQUIRED_MESSAGE)
        question = require_question(question)

        inline = normalize_artifact(artifact)
        request = build_inference_request(question, inline)

        logger.info(
            f"Document query: filename={artifact.filename!r} "
            f"media_type={artifact.media_type} size={artifact.size}"
        )
        return await self.inference.generate(request)
