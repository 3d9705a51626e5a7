from __future__ import annotations

from app.ai.factory import get_ai_client as _build_default_ai_client
from app.ai.types import AIClient
from app.core.document_store import DocumentStore
from app.core.document_store import get_document_store as _default_document_store


def get_document_store() -> DocumentStore:
    return _default_document_store()


def get_ai_client() -> AIClient:
    return _build_default_ai_client()
