"""
Artifact Normalizer: 업로드 바이트 → provider inline 표현.

순수 인코딩 단계:
- 리사이즈/OCR/파싱 없음
- 네트워크/부작용 없음
- 실패 없음 (임의 바이트의 base64 인코딩은 항상 성공)
"""

import base64
from pathlib import PurePath

from src.domain.constants import DEFAULT_MEDIA_TYPE, MEDIA_TYPES_BY_EXTENSION
from src.domain.schemas import InlineData, UploadedArtifact


def normalize_artifact(artifact: UploadedArtifact) -> InlineData:
    """
    파일 바이트를 base64 텍스트로 인코딩.

    빈 바이트도 허용 ("" 반환). 파일 자체가 없는 경우는 호출자가 검증.

    Args:
        artifact: 업로드된 파일

    Returns:
        InlineData (media type은 선언된 값 그대로)
    """
    encoded = base64.b64encode(artifact.content).decode("ascii")
    return InlineData(data=encoded, mime_type=artifact.media_type)


def guess_media_type(filename: str | None, declared: str | None = None) -> str:
    """
    선언된 media type이 없거나 octet-stream일 때 확장자로 추정.

    선언된 값이 있으면 그대로 사용 (서버는 media type을 재검증하지 않음).
    """
    if declared and declared.lower() != DEFAULT_MEDIA_TYPE:
        return declared

    if filename:
        suffix = PurePath(filename).suffix.lower()
        if suffix in MEDIA_TYPES_BY_EXTENSION:
            return MEDIA_TYPES_BY_EXTENSION[suffix]

    return DEFAULT_MEDIA_TYPE
