"""
애플리케이션 설정.

로드 순서:
1. 프로젝트 루트 default.yaml (없으면 빈 설정)
2. 환경변수 (.env 포함): API 키, PORT

API 키는 기동 시 1회만 읽는다. 없으면 ConfigError (요청 시점이 아니라 기동 실패).
이후 설정 객체는 읽기 전용으로 provider에 명시적으로 전달.
"""

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    ACCEPTED_EXTENSIONS,
    DEFAULT_ALLOWED_ORIGIN,
    DEFAULT_API_KEY_ENV,
    DEFAULT_MODEL,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
)
from src.domain.errors import ConfigError, ErrorCodes

PROJECT_ROOT = Path(__file__).parent.parent.parent


# =============================================================================
# Config Objects
# =============================================================================


@dataclass(frozen=True)
class AIConfig:
    """Provider 설정. api_key는 로그에 남기지 않는다."""
    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS
    max_retries: int = 0
    retry_initial_delay: float = 1.0


@dataclass(frozen=True)
class CORSConfig:
    """단일 origin만 허용."""
    allow_origin: str = DEFAULT_ALLOWED_ORIGIN
    allow_methods: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH")
    allow_headers: tuple[str, ...] = ("Content-Type", "Authorization")
    allow_credentials: bool = True

    def middleware_kwargs(self) -> dict[str, Any]:
        """CORSMiddleware 인자."""
        return {
            "allow_origins": [self.allow_origin],
            "allow_methods": list(self.allow_methods),
            "allow_headers": list(self.allow_headers),
            "allow_credentials": self.allow_credentials,
        }


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class UIConfig:
    accepted_extensions: tuple[str, ...] = ACCEPTED_EXTENSIONS
    escape_answer_html: bool = True


@dataclass(frozen=True)
class AppConfig:
    ai: AIConfig
    cors: CORSConfig = field(default_factory=CORSConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"


# =============================================================================
# Loading
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, Mapping):
        raise ConfigError(
            ErrorCodes.INVALID_CONFIG,
            f"Config section '{key}' must be a mapping",
            section=key,
        )
    return value


def _optional_timeout(value: Any) -> float | None:
    if value is None:
        return None
    timeout = float(value)
    if timeout <= 0:
        raise ConfigError(
            ErrorCodes.INVALID_CONFIG,
            "ai.timeout must be positive or null",
            timeout=value,
        )
    return timeout


def build_cors_config(raw: Mapping[str, Any]) -> CORSConfig:
    """cors 섹션 → CORSConfig. API 키 없이도 앱 생성 시점에 필요."""
    cors_raw = _section(raw, "cors")
    return CORSConfig(
        allow_origin=cors_raw.get("allow_origin", DEFAULT_ALLOWED_ORIGIN),
        allow_methods=tuple(
            cors_raw.get("allow_methods", CORSConfig.allow_methods)
        ),
        allow_headers=tuple(
            cors_raw.get("allow_headers", CORSConfig.allow_headers)
        ),
        allow_credentials=bool(cors_raw.get("allow_credentials", True)),
    )


def build_server_config(
    raw: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
) -> ServerConfig:
    """server 섹션 + PORT 환경변수 → ServerConfig."""
    env = os.environ if environ is None else environ
    server_raw = _section(raw, "server")
    port = env.get("PORT") or server_raw.get("port", DEFAULT_PORT)
    try:
        return ServerConfig(
            host=server_raw.get("host", "127.0.0.1"),
            port=int(port),
        )
    except ValueError as e:
        raise ConfigError(
            ErrorCodes.INVALID_CONFIG,
            "PORT must be an integer",
            port=port,
        ) from e


def build_app_config(
    raw: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    default.yaml 내용 + 환경변수 → AppConfig.

    Args:
        raw: load_config() 결과
        environ: 환경변수 (None이면 os.environ)

    Raises:
        ConfigError: API 키 누락, 잘못된 값
    """
    env = os.environ if environ is None else environ

    ai_raw = _section(raw, "ai")
    api_key_env = ai_raw.get("api_key_env", DEFAULT_API_KEY_ENV)
    api_key = (env.get(api_key_env) or "").strip()
    if not api_key:
        raise ConfigError(
            ErrorCodes.MISSING_CREDENTIAL,
            f"{api_key_env} is not set",
            env_var=api_key_env,
        )

    max_retries = int(ai_raw.get("max_retries", 0))
    if max_retries < 0:
        raise ConfigError(
            ErrorCodes.INVALID_CONFIG,
            "ai.max_retries must be >= 0",
            max_retries=max_retries,
        )

    ai = AIConfig(
        api_key=api_key,
        model=ai_raw.get("model", DEFAULT_MODEL),
        timeout=_optional_timeout(ai_raw.get("timeout", DEFAULT_TIMEOUT_SECONDS)),
        max_retries=max_retries,
        retry_initial_delay=float(ai_raw.get("retry_initial_delay", 1.0)),
    )

    cors = build_cors_config(raw)
    server = build_server_config(raw, env)

    ui_raw = _section(raw, "ui")
    ui = UIConfig(
        accepted_extensions=tuple(
            ext.lower() for ext in ui_raw.get("accepted_extensions", ACCEPTED_EXTENSIONS)
        ),
        escape_answer_html=bool(ui_raw.get("escape_answer_html", True)),
    )

    log_level = str(_section(raw, "logging").get("level", "INFO")).upper()

    return AppConfig(ai=ai, cors=cors, server=server, ui=ui, log_level=log_level)


# =============================================================================
# Logging
# =============================================================================


def configure_logging(level: str = "INFO") -> None:
    """
    애플리케이션 로깅 설정.

    Args:
        level: DEBUG, INFO, WARNING, ERROR
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # 서드파티 로그 소음 줄이기
    for noisy in ("httpx", "httpcore", "google", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
