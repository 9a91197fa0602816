#!/usr/bin/env python
"""
Gemini API 연결 확인 스크립트.

작은 CSV를 inline 파일로 보내 전체 파이프라인(normalize → prompt → inference)을
실제 provider로 1회 실행한다.

실행:
    uv run python scripts/check_api_connection.py
"""

import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

# .env 파일 로드
from dotenv import load_dotenv

load_dotenv()

SAMPLE_CSV = b"quarter,revenue\nQ1,100\nQ2,120\nQ3,150\n"
SAMPLE_QUESTION = "Which quarter had the highest revenue?"


async def check_gemini() -> bool:
    """Google Gemini API 확인."""
    print("\n" + "=" * 60)
    print("🧪 Google Gemini API 확인")
    print("=" * 60)

    from src.app.config import build_app_config, load_config
    from src.app.services.formatter import format_answer
    from src.app.services.inference import InferenceService
    from src.app.services.query import DocumentQueryService
    from src.domain.errors import ConfigError, InferenceFailed
    from src.domain.schemas import UploadedArtifact

    try:
        config = build_app_config(load_config())
    except ConfigError as e:
        print(f"❌ {e.message}")
        print("   .env 파일에 실제 API 키를 입력하세요.")
        return False

    if config.ai.api_key.startswith("AI..."):
        print("❌ API 키가 예시 값입니다. .env 파일을 확인하세요.")
        return False

    print(f"✅ API 키 발견: {config.ai.api_key[:8]}...")
    print(f"   모델: {config.ai.model}, 타임아웃: {config.ai.timeout}s")

    service = DocumentQueryService(InferenceService.from_config(config.ai))
    artifact = UploadedArtifact(
        content=SAMPLE_CSV,
        media_type="text/csv",
        filename="sample.csv",
    )

    try:
        print("📤 테스트 요청 전송 중 (sample.csv)...")
        result = await service.answer(artifact, SAMPLE_QUESTION)
    except InferenceFailed as e:
        print(f"❌ Gemini API 오류: {e.context.get('cause')}: {e.message}")
        return False

    print(f"📥 응답 ({result.finish_reason}):")
    print(format_answer(result.answer_text)[:300])
    print("✅ Gemini API 연결 성공!")
    return True


async def main() -> int:
    print("🚀 API 연결 확인 시작")
    passed = await check_gemini()
    print("=" * 60)
    if passed:
        print("🎉 연결 확인 통과!")
    else:
        print("⚠️ 실패. .env 파일과 default.yaml을 확인하세요.")
    return 0 if passed else 1


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
