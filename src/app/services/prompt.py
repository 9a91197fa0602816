"""
Prompt Builder: 질문 + inline 파일 → InferenceRequest.

지시문 형식은 하나뿐 (파일 타입별 분기 없음).
"""

from src.domain.constants import QUESTION_REQUIRED_MESSAGE
from src.domain.errors import ErrorCodes, ValidationError
from src.domain.schemas import InferenceRequest, InlineData

PREAMBLE_TEMPLATE = (
    "You are an expert business consultant. Analyze the provided business data "
    "and answer the user's question with actionable insights. "
    "User's Question: {question} "
    "Provide a detailed answer, citing the relevant data points from the context "
    "if applicable."
)


def require_question(question: str | None) -> str:
    """질문이 비어 있으면 ValidationError. 외부 호출 전에 검사."""
    if question is None or not question.strip():
        raise ValidationError(
            ErrorCodes.QUESTION_REQUIRED,
            QUESTION_REQUIRED_MESSAGE,
        )
    return question


def build_preamble(question: str) -> str:
    """질문을 그대로 포함한 지시문 생성."""
    return PREAMBLE_TEMPLATE.format(question=require_question(question))


def build_inference_request(question: str, artifact: InlineData) -> InferenceRequest:
    """
    추론 요청 구성.

    Args:
        question: 사용자 질문 (비어 있으면 안 됨)
        artifact: normalize_artifact 결과

    Returns:
        InferenceRequest (parts 순서: 지시문 → 파일)
    """
    return InferenceRequest(
        preamble=build_preamble(question),
        question=question,
        artifact=artifact,
    )
