from __future__ import annotations

import json
import re
from typing import Any

from app.core.errors import ModelResponseError

# Greedy on purpose: first "{" to last "}" so nested objects stay intact.
_JSON_SPAN_RE = re.compile(r"\{[\s\S]*\}")


def extract_json(text: str) -> dict[str, Any]:
    """Pull the JSON object out of free-form model text.

    Falls back to parsing the whole text when no braces are present. Raises
    ModelResponseError when the result is not valid JSON or not an object.
    """
    raw = text or ""
    match = _JSON_SPAN_RE.search(raw)
    candidate = match.group(0) if match else raw
    try:
        parsed = json.loads(candidate)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ModelResponseError("Model response was not valid JSON") from exc
    if not isinstance(parsed, dict):
        raise ModelResponseError("Model response JSON was not an object")
    return parsed
