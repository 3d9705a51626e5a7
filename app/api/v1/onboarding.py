from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.api.deps import get_document_store
from app.core.document_store import DocumentStore
from app.core.errors import ServiceError, to_http_exception
from app.schemas.onboarding import OnboardingProfile, OnboardingRequest
from app.services.onboarding_service import create_profile, get_profile

router = APIRouter()


@router.post("/onboarding", response_model=OnboardingProfile, status_code=status.HTTP_201_CREATED)
def onboarding_create(payload: OnboardingRequest, store: DocumentStore = Depends(get_document_store)):
    try:
        return create_profile(store, payload)
    except ServiceError as exc:
        raise to_http_exception(exc, "Server Error") from exc


@router.get("/onboarding/{clerk_id}", response_model=OnboardingProfile)
def onboarding_get(clerk_id: str, store: DocumentStore = Depends(get_document_store)):
    try:
        return get_profile(store, clerk_id)
    except ServiceError as exc:
        raise to_http_exception(exc, "Error fetching onboarding info") from exc
