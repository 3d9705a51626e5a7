from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings, settings as app_settings

_DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None = None
    timeout_s: float = 60.0
    max_retries: int = 2


def load_ai_config(settings: Settings = app_settings) -> AIConfig:
    provider = settings.ai_provider
    model = (settings.ai_model or _DEFAULT_MODELS.get(provider, "")).strip()
    api_key = settings.gemini_api_key if provider == "gemini" else settings.openai_api_key
    return AIConfig(
        provider=provider,
        model=model,
        api_key=(api_key or "").strip() or None,
        base_url=settings.openai_base_url if provider == "openai" else None,
        timeout_s=settings.ai_timeout_s,
        max_retries=settings.ai_max_retries,
    )
