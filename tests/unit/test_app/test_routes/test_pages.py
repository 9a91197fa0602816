"""
test_pages.py - 업로드 화면 테스트

검증 포인트:
- GET / 폼 렌더링 (허용 확장자, submit 비활성화 속성)
- POST /ui/ask 답변 조각 (포맷 + escape)
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.config import AIConfig, AppConfig, UIConfig
from src.app.providers.base import ProviderUnavailable
from src.app.routes import pages

FILES = {"file": ("revenue.csv", b"quarter,revenue\nQ1,100\n", "text/csv")}


class TestIndex:
    """GET /."""

    def test_renders_form(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "ARVIS (Adaptive Retrieval &amp; Insight System)" in response.text
        assert 'accept=".pdf,.csv,.docx,.txt"' in response.text
        assert 'hx-post="/ui/ask"' in response.text

    def test_submit_disabled_while_requesting(self, client):
        """요청 중 버튼 비활성화 (HTMX)."""
        response = client.get("/")

        assert 'hx-disabled-elt="#submit-btn"' in response.text


class TestAsk:
    """POST /ui/ask."""

    def test_formatted_answer(self, client, stub_provider):
        stub_provider.answer = "**Revenue** grew *10%\n"

        response = client.post("/ui/ask", files=FILES, data={"question": "Q?"})

        assert response.status_code == 200
        assert "<strong>Revenue</strong> grew <br />*10%<br />" in response.text

    def test_answer_html_escaped_by_default(self, client, stub_provider):
        stub_provider.answer = "<script>alert(1)</script> **ok**"

        response = client.post("/ui/ask", files=FILES, data={"question": "Q?"})

        assert "<script>" not in response.text
        assert "&lt;script&gt;" in response.text
        assert "<strong>ok</strong>" in response.text

    def test_answer_raw_when_escape_disabled(self, query_service, stub_provider):
        app = FastAPI()
        app.include_router(pages.router)
        app.state.app_config = AppConfig(
            ai=AIConfig(api_key="k"),
            ui=UIConfig(escape_answer_html=False),
        )
        app.state.query_service = query_service
        stub_provider.answer = "<em>raw</em>"

        response = TestClient(app).post("/ui/ask", files=FILES, data={"question": "Q?"})

        assert "<em>raw</em>" in response.text

    def test_validation_banner(self, client, stub_provider):
        response = client.post("/ui/ask", data={"question": "Q?"})

        assert response.status_code == 200
        assert "Please upload a file and enter a question." in response.text
        assert stub_provider.call_count == 0

    def test_failure_banner(self, client, stub_provider):
        stub_provider.error = ProviderUnavailable("down")

        response = client.post("/ui/ask", files=FILES, data={"question": "Q?"})

        assert "Something went wrong. Please try again." in response.text
        assert 'data-testid="answer"' not in response.text

    def test_unexpected_error_banner(self, client, query_service, monkeypatch):
        """예상 못 한 예외도 같은 배너."""

        async def boom(artifact, question):
            raise RuntimeError("bug")

        monkeypatch.setattr(query_service, "answer", boom)

        response = client.post("/ui/ask", files=FILES, data={"question": "Q?"})

        assert response.status_code == 200
        assert "Something went wrong. Please try again." in response.text
