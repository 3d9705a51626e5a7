from __future__ import annotations

from typing import Optional

from google import genai
from google.genai import types


class GeminiProvider:
    def __init__(self, model: str, api_key: Optional[str] = None, timeout_s: float = 60.0):
        self._model = model
        key = (api_key or "").strip()
        # Without a key the provider still builds, so requests that never reach
        # the model (validation failures, lookups) are unaffected.
        self._client = (
            genai.Client(api_key=key, http_options=types.HttpOptions(timeout=int(timeout_s * 1000)))
            if key
            else None
        )

    def complete(self, prompt: str, *, max_output_tokens: int | None = None) -> str:
        if self._client is None:
            raise RuntimeError("GEMINI_API_KEY is missing")

        config = None
        if max_output_tokens:
            config = types.GenerateContentConfig(max_output_tokens=max_output_tokens)

        response = self._client.models.generate_content(
            model=self._model,
            contents=prompt,
            config=config,
        )
        return response.text or ""
