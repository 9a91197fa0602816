"""
Pytest fixtures for the document-query tests.

외부 provider는 절대 호출하지 않는다:
- StubProvider로 답변/실패를 주입
- Gemini SDK는 provider._client에 MagicMock 주입
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.config import AIConfig, AppConfig
from src.app.providers.base import InferenceProvider, ProviderFailure
from src.app.routes import pages, read_file
from src.app.services.inference import InferenceService
from src.app.services.query import DocumentQueryService
from src.domain.schemas import InferenceRequest, InferenceResult, UploadedArtifact

# =============================================================================
# Stub Provider
# =============================================================================


class StubProvider(InferenceProvider):
    """
    테스트용 provider.

    answer를 돌려주거나, error가 설정돼 있으면 raise.
    받은 요청은 requests에 기록.
    """

    name = "stub"

    def __init__(self, answer: str = "stub answer", model: str = "stub-model"):
        self.answer = answer
        self.model = model
        self.error: ProviderFailure | None = None
        self.requests: list[InferenceRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def generate(self, request: InferenceRequest) -> InferenceResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return InferenceResult(answer_text=self.answer, model=self.model)


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def sample_csv_bytes() -> bytes:
    """분기 매출 CSV."""
    return b"quarter,revenue\nQ1,100\nQ2,120\nQ3,150\n"


@pytest.fixture
def sample_artifact(sample_csv_bytes: bytes) -> UploadedArtifact:
    return UploadedArtifact(
        content=sample_csv_bytes,
        media_type="text/csv",
        filename="revenue.csv",
    )


@pytest.fixture
def sample_csv_file(tmp_path: Path, sample_csv_bytes: bytes) -> Path:
    """디스크 상의 CSV 파일."""
    path = tmp_path / "revenue.csv"
    path.write_bytes(sample_csv_bytes)
    return path


# =============================================================================
# Service / Config Fixtures
# =============================================================================


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def query_service(stub_provider: StubProvider) -> DocumentQueryService:
    return DocumentQueryService(InferenceService(stub_provider))


@pytest.fixture
def test_config() -> AppConfig:
    """테스트용 설정 (API 키는 가짜)."""
    return AppConfig(ai=AIConfig(api_key="test-api-key", timeout=5.0))


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def app(test_config: AppConfig, query_service: DocumentQueryService) -> FastAPI:
    """lifespan 없이 라우터 + state만 구성한 테스트용 앱."""
    app = FastAPI()
    app.include_router(read_file.router)
    app.include_router(pages.router)

    app.state.app_config = test_config
    app.state.query_service = query_service

    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """테스트 클라이언트."""
    with TestClient(app) as test_client:
        yield test_client
