from __future__ import annotations

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from app.core.errors import ServiceError, to_http_exception
from app.schemas.resume import ResumeAnalysisResponse
from app.services.resume_service import analyze_resume_pdf

router = APIRouter()


@router.post("/resume/upload", response_model=ResumeAnalysisResponse)
def resume_upload(
    resume: UploadFile | None = File(default=None),
    jd: str = Form(default=""),
):
    if resume is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="resume file is required")

    content = resume.file.read()
    try:
        return analyze_resume_pdf(content, jd)
    except ServiceError as exc:
        raise to_http_exception(exc, "PDF parsing failed") from exc
