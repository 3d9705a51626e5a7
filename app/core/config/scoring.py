from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, model_validator

_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"


class ContactPoints(BaseModel):
    name: int
    email: int
    phone: int


class SkillTiers(BaseModel):
    tiers: list[tuple[int, int]]
    max: int


class KeywordCategory(BaseModel):
    points_per_match: int
    cap: int
    keywords: list[str]


class JDMatchPoints(BaseModel):
    max: int


class Rubric(BaseModel):
    total_max: int
    contact: ContactPoints
    skills: SkillTiers
    experience: KeywordCategory
    projects: KeywordCategory
    education: KeywordCategory
    achievements: KeywordCategory
    jd_match: JDMatchPoints

    @model_validator(mode="after")
    def _maxima_add_up(self) -> "Rubric":
        contact = self.contact.name + self.contact.email + self.contact.phone
        categories = sum(
            c.cap for c in (self.experience, self.projects, self.education, self.achievements)
        )
        if contact + self.skills.max + categories + self.jd_match.max != self.total_max:
            raise ValueError("category maxima must add up to total_max")
        return self

    def keyword_category(self, name: str) -> KeywordCategory:
        category = getattr(self, name, None)
        if not isinstance(category, KeywordCategory):
            raise KeyError(f"Unknown keyword category '{name}'")
        return category


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    """Raw mapping from repo-level config/scoring.yaml, read once."""
    if not _SCORING_CONFIG_PATH.exists():
        raise RuntimeError(
            f"Scoring config not found at '{_SCORING_CONFIG_PATH}'. "
            "Expected file: config/scoring.yaml"
        )

    try:
        parsed = yaml.safe_load(_SCORING_CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise RuntimeError(f"Failed to load scoring config '{_SCORING_CONFIG_PATH}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid scoring config '{_SCORING_CONFIG_PATH}': expected a top-level mapping."
        )
    return parsed


@lru_cache(maxsize=1)
def get_rubric() -> Rubric:
    try:
        return Rubric.model_validate(get_scoring_config().get("rubric"))
    except ValidationError as exc:
        raise RuntimeError(f"Invalid rubric in '{_SCORING_CONFIG_PATH}': {exc}") from exc

