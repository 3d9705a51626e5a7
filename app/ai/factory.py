from functools import lru_cache

from app.ai.config import AIConfig, load_ai_config
from app.ai.types import AIClient

from app.ai.providers.openai_provider import OpenAIProvider
from app.ai.providers.gemini_provider import GeminiProvider


def build_ai_client(cfg: AIConfig) -> AIClient:
    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            max_retries=cfg.max_retries,
        )

    if cfg.provider == "gemini":
        return GeminiProvider(model=cfg.model, api_key=cfg.api_key, timeout_s=cfg.timeout_s)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")


@lru_cache(maxsize=1)
def get_ai_client() -> AIClient:
    return build_ai_client(load_ai_config())
