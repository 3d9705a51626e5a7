from __future__ import annotations

import logging

from app.core.document_store import DocumentStore
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.schemas.onboarding import OnboardingProfile, OnboardingRequest

logger = logging.getLogger(__name__)

PROFILES = "onboarding_profiles"


def create_profile(store: DocumentStore, payload: OnboardingRequest) -> OnboardingProfile:
    if not payload.clerk_id or not payload.name or not payload.email:
        raise ValidationError("Missing required fields")

    profile = OnboardingProfile(
        clerk_id=payload.clerk_id,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        skills=payload.skills,
        city=payload.city,
        industry=payload.industry,
        has_onboarded=True,
    )
    created = store.create_unless_exists(PROFILES, profile.to_document(), {"clerk_id": payload.clerk_id})
    if created is None:
        raise ConflictError("Profile already exists")
    logger.info("onboarding_profile_created clerk_id=%s", payload.clerk_id)
    return OnboardingProfile.model_validate(created)


def get_profile(store: DocumentStore, clerk_id: str) -> OnboardingProfile:
    doc = store.find_one(PROFILES, {"clerk_id": clerk_id})
    if doc is None:
        raise NotFoundError("Not onboarded yet")
    return OnboardingProfile.model_validate(doc)
