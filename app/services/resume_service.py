from __future__ import annotations

import logging

from app.features.resume_extract import (
    extract_email,
    extract_jd_keywords,
    extract_name,
    extract_phone,
    extract_skills,
    normalize_text,
)
from app.features.resume_score import missing_jd_keywords, score_resume
from app.parsing.pdf_text import extract_pdf_text
from app.schemas.resume import ResumeAnalysisResponse

logger = logging.getLogger(__name__)


def analyze_resume_text(raw_text: str, jd_text: str = "") -> ResumeAnalysisResponse:
    cleaned = normalize_text(raw_text)

    name = extract_name(cleaned)
    email = extract_email(cleaned)
    phone = extract_phone(cleaned)
    skills = extract_skills(cleaned)

    jd_skills = extract_jd_keywords(jd_text)
    score = score_resume(
        text=cleaned,
        name=name,
        email=email,
        phone=phone,
        skills=skills,
        jd_skills=jd_skills,
    )

    return ResumeAnalysisResponse(
        name=name,
        email=email,
        phone=phone,
        skills=skills,
        jd_skills=jd_skills,
        missing_skills=missing_jd_keywords(skills, jd_skills),
        jd_match_score=score.jd_match,
        normalized_score=score.normalized,
        score_breakdown=score,
        text=cleaned,
    )


def analyze_resume_pdf(content: bytes, jd_text: str = "") -> ResumeAnalysisResponse:
    raw_text = extract_pdf_text(content)
    result = analyze_resume_text(raw_text, jd_text)
    logger.info(
        "resume_analyzed chars=%s skills=%s jd_skills=%s score=%s",
        len(result.text),
        len(result.skills),
        len(result.jd_skills),
        result.normalized_score,
    )
    return result
