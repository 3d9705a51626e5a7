from __future__ import annotations

from typing import Optional

from openai import OpenAI


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        max_retries: int = 2,
        temperature: float = 0.7,
    ):
        self._model = model
        self._temperature = temperature
        key = (api_key or "").strip()
        self._client = (
            OpenAI(api_key=key, base_url=base_url or None, timeout=timeout_s, max_retries=max_retries)
            if key
            else None
        )

    def complete(self, prompt: str, *, max_output_tokens: int | None = None) -> str:
        if self._client is None:
            raise RuntimeError("OPENAI_API_KEY is missing")

        create_kwargs = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
        }
        if max_output_tokens:
            create_kwargs["max_tokens"] = max_output_tokens

        response = self._client.chat.completions.create(**create_kwargs)
        content = response.choices[0].message.content if response.choices else ""
        return content or ""
