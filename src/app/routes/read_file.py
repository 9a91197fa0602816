"""
Read-File Route: 문서 질의 orchestrator의 HTTP 경계.

- POST /read-file (multipart: file, question)
  - 200 {"generatedText": "..."}
  - 400 {"error": "File is required"} / {"error": "Question is required"}
  - 500 {"error": "An error occurred while generating content"}

실패 원인은 로그에만 남기고 응답 본문은 고정 문구.
"""

import logging

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from src.app.services.normalize import guess_media_type
from src.app.services.query import DocumentQueryService
from src.domain.constants import GENERATION_FAILED_MESSAGE
from src.domain.errors import InferenceFailed, ValidationError
from src.domain.schemas import UploadedArtifact

logger = logging.getLogger(__name__)

router = APIRouter()


def get_query_service(request: Request) -> DocumentQueryService:
    """lifespan에서 만든 서비스."""
    service: DocumentQueryService = request.app.state.query_service
    return service


async def read_upload(file: UploadFile | None) -> UploadedArtifact | None:
    """UploadFile → UploadedArtifact. 파일이 없으면 None."""
    if file is None:
        return None

    content = await file.read()
    return UploadedArtifact(
        content=content,
        media_type=guess_media_type(file.filename, file.content_type),
        filename=file.filename,
    )


@router.post("/read-file")
async def read_file(
    request: Request,
    file: UploadFile | None = File(None),
    question: str | None = Form(None),
) -> JSONResponse:
    """파일 + 질문 → 답변 원문."""
    artifact = await read_upload(file)
    service = get_query_service(request)

    try:
        result = await service.answer(artifact, question)

    except ValidationError as e:
        logger.info(f"Rejected request: {e.code}")
        return JSONResponse(status_code=400, content={"error": e.message})

    except InferenceFailed as e:
        logger.error(f"Error generating content: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": GENERATION_FAILED_MESSAGE},
        )

    except Exception as e:
        # 예상 못 한 실패도 같은 계약으로 응답 (부분 응답 없음)
        logger.error(f"Unexpected error generating content: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": GENERATION_FAILED_MESSAGE},
        )

    return JSONResponse(content={"generatedText": result.answer_text})
