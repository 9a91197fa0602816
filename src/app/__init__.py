"""
App layer: 문서 질의 서버 (FastAPI).

역할:
- POST /read-file: 파일 + 질문 → Gemini 답변 원문
- GET /: 업로드 화면 (Jinja2 + HTMX)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML
- src/client/ → 서버를 호출하는 클라이언트 (폼 상태 머신, CLI)
"""
