"""
Form Controller: 업로드 폼 상태 머신.

상태 전이:
- Idle → FileSelected          : 파일 선택 (마지막 1개만 유지)
- Idle/FileSelected → (그대로)  : 파일 또는 질문 없이 submit → ValidationError
- Idle/FileSelected → Submitting: 유효한 submit (호출 정확히 1건)
- Submitting → Success(answer) : 답변 수신 (format_answer 적용)
- Submitting → Failed(message) : 어떤 실패든 동일한 문구
- Success/Failed → Submitting  : 재제출 가능

Submitting 중 submit은 불가 (화면에서 버튼 비활성화와 동일). 취소 없음.
"""

import logging
import mimetypes
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from src.app.services.formatter import format_answer
from src.app.services.normalize import guess_media_type
from src.domain.constants import (
    ACCEPTED_EXTENSIONS,
    CLIENT_FAILURE_MESSAGE,
    CLIENT_UNSUPPORTED_FILE_MESSAGE,
    CLIENT_VALIDATION_MESSAGE,
)
from src.domain.errors import DocumentQueryError, ErrorCodes, ValidationError

logger = logging.getLogger(__name__)


class RequestStatus(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SelectedFile:
    """사용자가 고른 파일."""
    filename: str
    content: bytes
    media_type: str

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower()

    @classmethod
    def from_path(cls, path: Path) -> "SelectedFile":
        """로컬 파일 → SelectedFile (media type은 확장자로 추정)."""
        declared, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            media_type=guess_media_type(path.name, declared),
        )


@dataclass(frozen=True)
class ClientRequestState:
    """폼 상태. answer_html은 Success, error는 Failed일 때만."""
    status: RequestStatus
    answer_html: str | None = None
    error: str | None = None


class SubmitInProgressError(RuntimeError):
    """Submitting 중 재제출 시도."""


# (file, question) → 답변 원문
SubmitFn = Callable[[SelectedFile, str], Awaitable[str]]


class FormController:
    """
    폼 상태 머신.

    Usage:
        client = ReadFileClient("http://localhost:3000")
        controller = FormController(client.read_file)
        controller.select_file(SelectedFile.from_path(Path("q3.csv")))
        controller.set_question("How did revenue change?")
        state = await controller.submit()
    """

    def __init__(
        self,
        submit: SubmitFn,
        *,
        accepted_extensions: tuple[str, ...] = ACCEPTED_EXTENSIONS,
        escape_html: bool = False,
    ):
        """
        Args:
            submit: 서버 호출 함수 (보통 ReadFileClient.read_file)
            accepted_extensions: 선택 가능한 확장자
            escape_html: True면 답변 원문을 escape한 뒤 포맷
        """
        self._submit = submit
        self.accepted_extensions = accepted_extensions
        self.escape_html = escape_html

        self.file: SelectedFile | None = None
        self.question: str = ""
        self.validation_error: str | None = None
        self._state = ClientRequestState(RequestStatus.IDLE)

    @property
    def state(self) -> ClientRequestState:
        return self._state

    @property
    def can_submit(self) -> bool:
        """submit 버튼 활성 여부."""
        return self._state.status != RequestStatus.SUBMITTING

    def select_file(self, file: SelectedFile) -> None:
        """
        파일 선택. 이전 파일은 대체된다.

        Raises:
            ValidationError: 허용되지 않은 확장자 (상태/파일 변경 없음)
        """
        if file.extension not in self.accepted_extensions:
            self.validation_error = CLIENT_UNSUPPORTED_FILE_MESSAGE
            raise ValidationError(
                ErrorCodes.UNSUPPORTED_FILE_TYPE,
                CLIENT_UNSUPPORTED_FILE_MESSAGE,
                filename=file.filename,
            )

        self.file = file
        self.validation_error = None
        if self._state.status == RequestStatus.IDLE:
            self._state = ClientRequestState(RequestStatus.FILE_SELECTED)

    def set_question(self, question: str) -> None:
        self.question = question

    async def submit(self) -> ClientRequestState:
        """
        현재 파일 + 질문 제출.

        Returns:
            Success 또는 Failed 상태

        Raises:
            SubmitInProgressError: 이미 Submitting
            ValidationError: 파일 또는 질문 없음 (호출 안 함, 상태 유지)
        """
        if not self.can_submit:
            raise SubmitInProgressError("A submission is already in progress")

        if self.file is None or not self.question.strip():
            self.validation_error = CLIENT_VALIDATION_MESSAGE
            code = (
                ErrorCodes.FILE_REQUIRED
                if self.file is None
                else ErrorCodes.QUESTION_REQUIRED
            )
            raise ValidationError(code, CLIENT_VALIDATION_MESSAGE)

        self.validation_error = None
        self._state = ClientRequestState(RequestStatus.SUBMITTING)

        try:
            answer_text = await self._submit(self.file, self.question)
        except DocumentQueryError as e:
            # 원인은 로그에만, 사용자에게는 단일 문구
            logger.warning(f"Submit failed: {e}")
            self._state = ClientRequestState(
                RequestStatus.FAILED,
                error=CLIENT_FAILURE_MESSAGE,
            )
            return self._state
        except Exception as e:
            logger.error(f"Unexpected submit failure: {e}", exc_info=True)
            self._state = ClientRequestState(
                RequestStatus.FAILED,
                error=CLIENT_FAILURE_MESSAGE,
            )
            return self._state

        self._state = ClientRequestState(
            RequestStatus.SUCCESS,
            answer_html=format_answer(answer_text, escape_html=self.escape_html),
        )
        return self._state
