from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from app.schemas.base import CamelModel, utc_now

MAX_TOTAL_QUESTIONS = 50


class Question(CamelModel):
    q_id: str
    question: str
    options: dict[str, str]
    correct_option: str
    explanation: str = ""


class Answer(CamelModel):
    q_id: str
    selected_option: str | None = None
    correct: bool


class InterviewSession(CamelModel):
    id: str | None = None
    clerk_id: str
    skill: str
    total_questions: int = 5
    questions: list[Question] = Field(default_factory=list)
    answers: list[Answer] = Field(default_factory=list)
    current_index: int = 0
    score: int = 0
    finished: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    def find_question(self, q_id: str) -> Question | None:
        return next((q for q in self.questions if q.q_id == q_id), None)

    def is_answered(self, q_id: str) -> bool:
        return any(a.q_id == q_id for a in self.answers)


class InterviewReport(CamelModel):
    id: str | None = None
    clerk_id: str
    session_id: str
    skill: str
    score: int
    total_questions: int
    accuracy: float
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)


class GeneratedQuestion(BaseModel):
    """Shape the model is asked to return for one multiple-choice question."""

    q: str = Field(min_length=1)
    options: dict[str, str] = Field(min_length=2)
    correct: str = Field(min_length=1)
    explanation: str = ""

    @model_validator(mode="after")
    def _correct_is_an_option(self) -> "GeneratedQuestion":
        if self.correct not in self.options:
            raise ValueError("correct option must be one of the option labels")
        return self


class InterviewAnalysis(CamelModel):
    accuracy: float | None = None
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    readiness_score: float | None = None


class SanitizedQuestion(CamelModel):
    q_id: str
    question: str
    options: dict[str, str]


class StartSessionRequest(CamelModel):
    clerk_id: str | None = None
    skill: str | None = None
    total_questions: int | None = Field(default=None, ge=1, le=MAX_TOTAL_QUESTIONS)


class StartSessionResponse(CamelModel):
    session_id: str
    question: SanitizedQuestion
    current_index: int
    total_questions: int


class NextQuestionResponse(CamelModel):
    question: SanitizedQuestion
    current_index: int
    total_questions: int


class AnswerRequest(CamelModel):
    session_id: str | None = None
    q_id: str | None = None
    selected_option: str | None = None


class AnswerResponse(CamelModel):
    correct: bool
    explanation: str
    improvement_tip: str | None = None


class FinishSessionRequest(CamelModel):
    session_id: str | None = None


class FinishSessionResponse(CamelModel):
    report_id: str
    report: InterviewAnalysis
    score: int
    total: int
