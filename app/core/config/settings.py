from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    document_db_path: str
    ai_provider: str
    ai_model: str | None
    gemini_api_key: str | None
    openai_api_key: str | None
    openai_base_url: str | None
    ai_timeout_s: float
    ai_max_retries: int
    model_json_retries: int
    mock_default_total_questions: int


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    document_db_path=_get_env("DOCUMENT_DB_PATH", "data/documents.db") or "data/documents.db",
    ai_provider=(_get_env("AI_PROVIDER", "gemini") or "gemini").strip().lower(),
    ai_model=_get_env("AI_MODEL"),
    gemini_api_key=_get_env("GEMINI_API_KEY"),
    openai_api_key=_get_env("OPENAI_API_KEY"),
    openai_base_url=_get_env("OPENAI_BASE_URL"),
    ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 60.0),
    ai_max_retries=_get_env_int("AI_MAX_RETRIES", 2),
    model_json_retries=max(0, _get_env_int("MODEL_JSON_RETRIES", 0)),
    mock_default_total_questions=_get_env_int("MOCK_DEFAULT_TOTAL_QUESTIONS", 5),
)

if settings.ai_provider not in {"gemini", "openai"}:
    raise RuntimeError("AI_PROVIDER must be either 'gemini' or 'openai'.")

if not 1 <= settings.mock_default_total_questions <= 50:
    raise RuntimeError("MOCK_DEFAULT_TOTAL_QUESTIONS must be between 1 and 50.")
