"""
Domain Constants: 파이프라인 전역 상수.

HTTP 응답 문구, 허용 확장자, 기본 모델 등
서버/클라이언트가 같은 값을 봐야 하는 것들.
"""

# =============================================================================
# HTTP Error Bodies (고정 문구 - 클라이언트 계약)
# =============================================================================

FILE_REQUIRED_MESSAGE = "File is required"
QUESTION_REQUIRED_MESSAGE = "Question is required"
GENERATION_FAILED_MESSAGE = "An error occurred while generating content"

# =============================================================================
# Client Messages (사용자 노출 문구)
# =============================================================================
# 실패 원인(네트워크/provider 거절)은 사용자에게 구분하지 않음

CLIENT_VALIDATION_MESSAGE = "Please upload a file and enter a question."
CLIENT_FAILURE_MESSAGE = "Something went wrong. Please try again."
CLIENT_UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Use PDF, CSV, DOCX or TXT."

# =============================================================================
# Upload Policy
# =============================================================================
# 클라이언트 파일 선택 필터. 서버는 media type을 재검증하지 않고 그대로 전달.

ACCEPTED_EXTENSIONS: tuple[str, ...] = (".pdf", ".csv", ".docx", ".txt")

DEFAULT_MEDIA_TYPE = "application/octet-stream"

MEDIA_TYPES_BY_EXTENSION: dict[str, str] = {
    ".pdf": "application/pdf",
    ".csv": "text/csv",
    ".txt": "text/plain",
    ".docx": (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ),
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}

# =============================================================================
# Provider Defaults
# =============================================================================

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_API_KEY_ENV = "GOOGLE_GENERATIVE_AI_KEY"
DEFAULT_TIMEOUT_SECONDS = 60.0

# =============================================================================
# Server Defaults
# =============================================================================

DEFAULT_PORT = 3000
DEFAULT_ALLOWED_ORIGIN = "http://localhost:5173"
APP_TITLE = "ARVIS (Adaptive Retrieval & Insight System)"
