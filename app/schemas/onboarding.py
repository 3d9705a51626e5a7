from __future__ import annotations

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, utc_now


class OnboardingRequest(CamelModel):
    clerk_id: str | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    skills: list[str] = Field(default_factory=list)
    city: str | None = None
    industry: str | None = None


class OnboardingProfile(CamelModel):
    id: str | None = None
    clerk_id: str
    name: str
    email: str
    phone: str | None = None
    skills: list[str] = Field(default_factory=list)
    city: str | None = None
    industry: str | None = None
    has_onboarded: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
