from __future__ import annotations

import logging

from app.ai.types import AIClient
from app.core.config import settings
from app.core.document_store import DocumentStore
from app.core.errors import InvalidStateError, NotFoundError, ValidationError
from app.features.resume_score import round_half_up
from app.schemas.interview import (
    MAX_TOTAL_QUESTIONS,
    Answer,
    AnswerResponse,
    FinishSessionResponse,
    InterviewReport,
    InterviewSession,
    NextQuestionResponse,
    Question,
    SanitizedQuestion,
    StartSessionResponse,
)
from app.services.interview_llm import generate_analysis, generate_improvement_tip, generate_question

logger = logging.getLogger(__name__)

SESSIONS = "interview_sessions"
REPORTS = "interview_reports"


def sanitize_question(question: Question) -> SanitizedQuestion:
    return SanitizedQuestion(q_id=question.q_id, question=question.question, options=question.options)


def load_session(store: DocumentStore, session_id: str) -> InterviewSession:
    doc = store.find_by_id(SESSIONS, session_id)
    if doc is None:
        raise NotFoundError("Session not found")
    return InterviewSession.model_validate(doc)


def _save_session(store: DocumentStore, session: InterviewSession) -> None:
    store.save(SESSIONS, session.to_document())


def start_session(
    store: DocumentStore,
    ai: AIClient,
    *,
    clerk_id: str | None,
    skill: str | None,
    total_questions: int | None = None,
) -> StartSessionResponse:
    if not clerk_id or not skill:
        raise ValidationError("clerkId and skill required")
    if total_questions is None:
        total_questions = settings.mock_default_total_questions
    elif not 1 <= total_questions <= MAX_TOTAL_QUESTIONS:
        raise ValidationError(f"totalQuestions must be between 1 and {MAX_TOTAL_QUESTIONS}")

    # Generated before anything is persisted: a bad model reply leaves no session behind.
    first = generate_question(ai, skill)
    session = InterviewSession(
        clerk_id=clerk_id,
        skill=skill,
        total_questions=total_questions,
        questions=[first],
    )
    created = store.create(SESSIONS, session.to_document())
    logger.info("mock_session_started session=%s skill=%s total=%s", created["id"], skill, session.total_questions)

    return StartSessionResponse(
        session_id=created["id"],
        question=sanitize_question(first),
        current_index=session.current_index,
        total_questions=session.total_questions,
    )


def next_question(store: DocumentStore, ai: AIClient, session_id: str) -> NextQuestionResponse:
    session = load_session(store, session_id)
    if session.finished:
        raise InvalidStateError("Session finished")
    if session.current_index >= session.total_questions:
        raise InvalidStateError("All questions answered; finish the session")

    index = session.current_index
    if index < len(session.questions):
        question = session.questions[index]
    else:
        question = generate_question(ai, session.skill)
        session.questions.append(question)
        _save_session(store, session)

    return NextQuestionResponse(
        question=sanitize_question(question),
        current_index=index,
        total_questions=session.total_questions,
    )


def submit_answer(
    store: DocumentStore,
    ai: AIClient,
    *,
    session_id: str | None,
    q_id: str | None,
    selected_option: str | None,
) -> AnswerResponse:
    if not session_id or not q_id:
        raise ValidationError("sessionId and qId required")

    session = load_session(store, session_id)
    if session.finished:
        raise InvalidStateError("Session finished")

    question = session.find_question(q_id)
    if question is None:
        raise NotFoundError("Question not found")
    if session.is_answered(q_id):
        raise InvalidStateError("Question already answered")

    correct = question.correct_option == selected_option
    session.answers.append(Answer(q_id=q_id, selected_option=selected_option, correct=correct))
    if correct:
        session.score += 1
    session.current_index = min(session.current_index + 1, session.total_questions)
    _save_session(store, session)

    improvement_tip = None
    if not correct:
        improvement_tip = generate_improvement_tip(ai, session.skill, question, selected_option)
        if improvement_tip is None:
            logger.info("mock_answer_tip_unavailable session=%s q=%s", session_id, q_id)

    return AnswerResponse(correct=correct, explanation=question.explanation, improvement_tip=improvement_tip)


def finish_session(store: DocumentStore, ai: AIClient, session_id: str | None) -> FinishSessionResponse:
    if not session_id:
        raise ValidationError("sessionId required")

    session = load_session(store, session_id)
    if session.finished:
        # A finished session without a report means synthesis failed last time; retry it.
        if store.find_one(REPORTS, {"session_id": session_id}) is not None:
            raise InvalidStateError("Session already finished")
    else:
        session.finished = True
        _save_session(store, session)

    analysis = generate_analysis(ai, session)
    accuracy = analysis.accuracy
    if accuracy is None:
        accuracy = round_half_up(session.score / session.total_questions * 100)
        analysis.accuracy = accuracy

    report = InterviewReport(
        clerk_id=session.clerk_id,
        session_id=session_id,
        skill=session.skill,
        score=session.score,
        total_questions=session.total_questions,
        accuracy=accuracy,
        strengths=analysis.strengths,
        weaknesses=analysis.weaknesses,
        tips=analysis.recommendations,
    )
    created = store.create(REPORTS, report.to_document())
    logger.info("mock_session_finished session=%s report=%s score=%s/%s", session_id, created["id"], session.score, session.total_questions)

    return FinishSessionResponse(
        report_id=created["id"],
        report=analysis,
        score=session.score,
        total=session.total_questions,
    )
