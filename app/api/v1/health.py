from fastapi import APIRouter

from app.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Liveness probe; also reports the configured model provider.")
async def health_check():
    return {"status": "healthy", "aiProvider": settings.ai_provider}
