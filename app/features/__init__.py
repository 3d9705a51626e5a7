from .resume_extract import (
    extract_email,
    extract_jd_keywords,
    extract_name,
    extract_phone,
    extract_skills,
    finalize_skills,
    normalize_text,
)
from .resume_score import ResumeScore, missing_jd_keywords, score_jd_match, score_resume

__all__ = [
    "normalize_text",
    "extract_email",
    "extract_phone",
    "extract_name",
    "extract_skills",
    "finalize_skills",
    "extract_jd_keywords",
    "ResumeScore",
    "score_resume",
    "score_jd_match",
    "missing_jd_keywords",
]
