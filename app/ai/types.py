from typing import Protocol


class AIClient(Protocol):
    def complete(self, prompt: str, *, max_output_tokens: int | None = None) -> str: ...
