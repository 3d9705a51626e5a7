from __future__ import annotations

import math

from app.core.config.scoring import get_rubric
from app.schemas.base import CamelModel


class ResumeScore(CamelModel):
    contact: int
    skills: int
    experience: int
    projects: int
    education: int
    achievements: int
    jd_match: int
    total: int
    normalized: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_contact(name: str | None, email: str | None, phone: str | None) -> int:
    points = get_rubric().contact
    score = 0
    if name:
        score += points.name
    if email:
        score += points.email
    if phone:
        score += points.phone
    return score


def score_skills(skills: list[str] | None) -> int:
    if not skills:
        return 0
    rubric = get_rubric().skills
    count = len(skills)
    for upper_bound, points in rubric.tiers:
        if count < upper_bound:
            return points
    return rubric.max


def score_keyword_category(text: str, category: str) -> int:
    rules = get_rubric().keyword_category(category)
    lowered = (text or "").lower()
    matched = sum(1 for word in rules.keywords if word in lowered)
    return min(matched * rules.points_per_match, rules.cap)


def score_experience(text: str) -> int:
    return score_keyword_category(text, "experience")


def score_projects(text: str) -> int:
    return score_keyword_category(text, "projects")


def score_education(text: str) -> int:
    return score_keyword_category(text, "education")


def score_achievements(text: str) -> int:
    return score_keyword_category(text, "achievements")


def score_jd_match(resume_skills: list[str], jd_skills: list[str]) -> int:
    """Share of JD keywords present in the resume, scaled to the JD maximum.

    A JD with no recognised keywords contributes 0.
    """
    if not jd_skills:
        return 0
    matches = [skill for skill in resume_skills if skill in jd_skills]
    return round_half_up(len(matches) / len(jd_skills) * get_rubric().jd_match.max)


def missing_jd_keywords(resume_skills: list[str], jd_skills: list[str]) -> list[str]:
    return [skill for skill in jd_skills if skill not in resume_skills]


def normalize_score(total: int) -> int:
    return round_half_up(total / get_rubric().total_max * 100)


def score_resume(
    *,
    text: str,
    name: str | None,
    email: str | None,
    phone: str | None,
    skills: list[str],
    jd_skills: list[str],
) -> ResumeScore:
    parts = {
        "contact": score_contact(name, email, phone),
        "skills": score_skills(skills),
        "experience": score_experience(text),
        "projects": score_projects(text),
        "education": score_education(text),
        "achievements": score_achievements(text),
        "jd_match": score_jd_match(skills, jd_skills),
    }
    total = sum(parts.values())
    return ResumeScore(**parts, total=total, normalized=normalize_score(total))
