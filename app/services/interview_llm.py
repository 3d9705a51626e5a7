from __future__ import annotations

import json
import logging
import secrets
import time
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.ai.json_extract import extract_json
from app.ai.types import AIClient
from app.core.config import settings
from app.core.errors import ModelResponseError, UpstreamError
from app.schemas.interview import (
    GeneratedQuestion,
    InterviewAnalysis,
    InterviewSession,
    Question,
)

logger = logging.getLogger(__name__)

ANALYSIS_MAX_OUTPUT_TOKENS = 6000

_STRICT_JSON_SUFFIX = (
    "\nYour previous reply could not be parsed. "
    "Respond with a single JSON object only: no markdown, no prose."
)


def new_question_id() -> str:
    return secrets.token_urlsafe(6)


def _question_prompt(skill: str) -> str:
    return f"""
Generate ONE multiple-choice technical interview question for skill: "{skill}".
Return JSON ONLY, exactly in this format:
{{
  "q": "Question text",
  "options": {{ "A": "Option A", "B": "Option B", "C": "Option C", "D": "Option D" }},
  "correct": "B",
  "explanation": "Short explanation (1-2 lines)"
}}
Rules:
- Provide one correct answer only.
- Use interview-level phrasing.
- Return ONLY JSON and no extra commentary.
"""


def _tip_prompt(skill: str, question: Question, selected_option: str | None) -> str:
    correct_text = question.options.get(question.correct_option, "")
    selected_text = question.options.get(selected_option or "", "N/A")
    return f"""
The user answered incorrectly.
Skill: {skill}
Question: {question.question}
Correct: {question.correct_option} -> {correct_text}
User Answer: {selected_option} -> {selected_text}

Give a concise improvement tip (max 2 sentences). Return plain text only.
"""


def _analysis_prompt(session: InterviewSession) -> str:
    incorrect: list[dict[str, Any]] = []
    for answer in session.answers:
        if answer.correct:
            continue
        question = session.find_question(answer.q_id)
        if question is None:
            continue
        incorrect.append(
            {
                "question": question.question,
                "correct": question.correct_option,
                "selected": answer.selected_option,
            }
        )

    return f"""
Create a JSON analysis for this mock interview.

Skill: {session.skill}
Score: {session.score}/{session.total_questions}
Incorrect questions: {json.dumps(incorrect, ensure_ascii=False)}

Return JSON only with keys:
{{
  "accuracy": number,
  "strengths": [string],
  "weaknesses": [string],
  "recommendations": [string],
  "readinessScore": number
}}
Make weaknesses specific and actionable. Keep recommendations to 3 short items.
"""


def _complete(ai: AIClient, prompt: str, *, purpose: str, max_output_tokens: int | None = None) -> str:
    started = time.perf_counter()
    try:
        text = ai.complete(prompt, max_output_tokens=max_output_tokens)
    except Exception as exc:  # noqa: BLE001 - provider SDKs raise their own hierarchies
        logger.warning("model_call_failed purpose=%s: %s", purpose, exc)
        raise UpstreamError("Model call failed") from exc
    logger.debug(
        "model_call_ok purpose=%s latency_ms=%s chars=%s",
        purpose,
        int((time.perf_counter() - started) * 1000),
        len(text or ""),
    )
    return text or ""


def _json_completion(ai: AIClient, prompt: str, *, purpose: str, max_output_tokens: int | None = None) -> dict[str, Any]:
    attempts = 1 + settings.model_json_retries
    for attempt in range(1, attempts + 1):
        raw = _complete(ai, prompt, purpose=purpose, max_output_tokens=max_output_tokens)
        try:
            return extract_json(raw)
        except ModelResponseError:
            logger.warning(
                "model_json_invalid purpose=%s attempt=%s/%s raw_len=%s",
                purpose,
                attempt,
                attempts,
                len(raw),
            )
            if attempt == attempts:
                raise
            prompt = prompt + _STRICT_JSON_SUFFIX
    raise ModelResponseError("Model response was not valid JSON")


def generate_question(ai: AIClient, skill: str) -> Question:
    payload = _json_completion(ai, _question_prompt(skill), purpose="question")
    try:
        generated = GeneratedQuestion.model_validate(payload)
    except PydanticValidationError as exc:
        raise ModelResponseError("Model returned a malformed question") from exc

    return Question(
        q_id=new_question_id(),
        question=generated.q,
        options=generated.options,
        correct_option=generated.correct,
        explanation=generated.explanation,
    )


def generate_improvement_tip(
    ai: AIClient,
    skill: str,
    question: Question,
    selected_option: str | None,
) -> str | None:
    """Short coaching tip for a wrong answer; None when the model is unavailable."""
    try:
        tip = _complete(ai, _tip_prompt(skill, question, selected_option), purpose="tip").strip()
    except UpstreamError:
        return None
    return tip or None


def generate_analysis(ai: AIClient, session: InterviewSession) -> InterviewAnalysis:
    payload = _json_completion(
        ai,
        _analysis_prompt(session),
        purpose="analysis",
        max_output_tokens=ANALYSIS_MAX_OUTPUT_TOKENS,
    )
    try:
        return InterviewAnalysis.model_validate(payload)
    except PydanticValidationError as exc:
        raise ModelResponseError("Model returned a malformed analysis") from exc
