from __future__ import annotations

from fastapi import APIRouter, Depends

from app.ai.types import AIClient
from app.api.deps import get_ai_client, get_document_store
from app.core.document_store import DocumentStore
from app.core.errors import ServiceError, to_http_exception
from app.schemas.interview import (
    AnswerRequest,
    AnswerResponse,
    FinishSessionRequest,
    FinishSessionResponse,
    NextQuestionResponse,
    StartSessionRequest,
    StartSessionResponse,
)
from app.services.interview_service import finish_session, next_question, start_session, submit_answer

router = APIRouter()


@router.post("/mock/start", response_model=StartSessionResponse)
def mock_start(
    payload: StartSessionRequest,
    store: DocumentStore = Depends(get_document_store),
    ai: AIClient = Depends(get_ai_client),
):
    try:
        return start_session(
            store,
            ai,
            clerk_id=payload.clerk_id,
            skill=payload.skill,
            total_questions=payload.total_questions,
        )
    except ServiceError as exc:
        raise to_http_exception(exc, "Failed to start session") from exc


@router.get("/mock/next/{session_id}", response_model=NextQuestionResponse)
def mock_next(
    session_id: str,
    store: DocumentStore = Depends(get_document_store),
    ai: AIClient = Depends(get_ai_client),
):
    try:
        return next_question(store, ai, session_id)
    except ServiceError as exc:
        raise to_http_exception(exc, "Failed to fetch next question") from exc


@router.post("/mock/answer", response_model=AnswerResponse)
def mock_answer(
    payload: AnswerRequest,
    store: DocumentStore = Depends(get_document_store),
    ai: AIClient = Depends(get_ai_client),
):
    try:
        return submit_answer(
            store,
            ai,
            session_id=payload.session_id,
            q_id=payload.q_id,
            selected_option=payload.selected_option,
        )
    except ServiceError as exc:
        raise to_http_exception(exc, "Failed to record answer") from exc


@router.post("/mock/finish", response_model=FinishSessionResponse)
def mock_finish(
    payload: FinishSessionRequest,
    store: DocumentStore = Depends(get_document_store),
    ai: AIClient = Depends(get_ai_client),
):
    try:
        return finish_session(store, ai, payload.session_id)
    except ServiceError as exc:
        raise to_http_exception(exc, "Failed to finish session") from exc
