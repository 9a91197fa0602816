"""
Page Routes: 업로드 화면 (Jinja2 + HTMX).

- GET / → 업로드 폼
- POST /ui/ask → 답변 HTML 조각 (포맷 적용) 또는 에러 배너

화면 상태는 HTMX가 관리: 요청 중 submit 버튼 비활성화 (hx-disabled-elt).
"""

import logging
from pathlib import Path

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.config import UIConfig
from src.app.routes.read_file import get_query_service, read_upload
from src.app.services.formatter import format_answer
from src.domain.constants import (
    APP_TITLE,
    CLIENT_FAILURE_MESSAGE,
    CLIENT_VALIDATION_MESSAGE,
)
from src.domain.errors import InferenceFailed, ValidationError

logger = logging.getLogger(__name__)

_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)

router = APIRouter()


def _ui_config(request: Request) -> UIConfig:
    ui: UIConfig = request.app.state.app_config.ui
    return ui


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """업로드 화면."""
    ui = _ui_config(request)
    return jinja_templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": APP_TITLE,
            "accept": ",".join(ui.accepted_extensions),
        },
    )


@router.post("/ui/ask", response_class=HTMLResponse)
async def ask(
    request: Request,
    file: UploadFile | None = File(None),
    question: str | None = Form(None),
) -> HTMLResponse:
    """답변 조각 렌더링. 에러도 200 + 배너 (HTMX swap 대상)."""
    ui = _ui_config(request)
    artifact = await read_upload(file)
    service = get_query_service(request)

    answer_html: str | None = None
    error: str | None = None

    try:
        result = await service.answer(artifact, question)
        answer_html = format_answer(
            result.answer_text,
            escape_html=ui.escape_answer_html,
        )
    except ValidationError:
        error = CLIENT_VALIDATION_MESSAGE
    except InferenceFailed as e:
        logger.error(f"Error generating content: {e}")
        error = CLIENT_FAILURE_MESSAGE
    except Exception as e:
        logger.error(f"Unexpected error generating content: {e}", exc_info=True)
        error = CLIENT_FAILURE_MESSAGE

    return jinja_templates.TemplateResponse(
        request,
        "_answer.html",
        {"answer_html": answer_html, "error": error},
    )
