"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload --port 3000
- 직접: uv run python -m src.app.main  (PORT 환경변수 사용)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.config import (
    build_app_config,
    build_cors_config,
    build_server_config,
    configure_logging,
    load_config,
)
from src.app.routes import pages, read_file
from src.app.services.inference import InferenceService
from src.app.services.query import DocumentQueryService
from src.domain.constants import APP_TITLE

# .env → 환경변수 (기동 시 1회)
load_dotenv()

logger = logging.getLogger(__name__)

# CORS는 앱 생성 시점에 등록해야 하므로 yaml만 먼저 읽는다 (API 키 불필요)
_raw_config = load_config()


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 검증 (API 키 누락 → ConfigError로 기동 실패), 서비스 생성
    종료 시: 정리할 리소스 없음 (요청 간 상태 없음)
    """
    # Startup
    config = build_app_config(_raw_config)
    configure_logging(config.log_level)

    app.state.app_config = config
    app.state.query_service = DocumentQueryService(
        InferenceService.from_config(config.ai)
    )
    logger.info(
        f"Server is running on port {config.server.port} "
        f"(model={config.ai.model}, origin={config.cors.allow_origin})"
    )

    yield

    # Shutdown
    logger.info("Server shutting down")


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title=APP_TITLE,
    description="Upload a business document and ask a question about it",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    **build_cors_config(_raw_config).middleware_kwargs(),
)


# =============================================================================
# Routes
# =============================================================================

# API 라우트
app.include_router(read_file.router, tags=["Read File"])

# 페이지 라우트 (HTML)
app.include_router(pages.router, tags=["Pages"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server = build_server_config(_raw_config)
    uvicorn.run(
        "src.app.main:app",
        host=server.host,
        port=server.port,
        reload=True,
    )
