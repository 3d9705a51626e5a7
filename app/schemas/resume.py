from __future__ import annotations

from app.features.resume_score import ResumeScore
from app.schemas.base import CamelModel


class ResumeAnalysisResponse(CamelModel):
    message: str = "Resume analyzed successfully!"
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    skills: list[str]
    jd_skills: list[str]
    missing_skills: list[str]
    jd_match_score: int
    normalized_score: int
    score_breakdown: ResumeScore
    text: str
