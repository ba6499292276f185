from fastapi import APIRouter, Depends, HTTPException

from resume_studio.models.cover_letter_models import (
    CoverLetterEnhanceRequest,
    CoverLetterParts,
    CoverLetterRequest,
    CoverLetterResponse,
    CoverLetterTemplateRequest,
)
from resume_studio.services.cover_letter_service import CoverLetterEngine
from resume_studio.utils.dependencies import get_cover_letter_engine

router = APIRouter()


@router.post("/generate", response_model=CoverLetterResponse)
async def generate_cover_letter(
    req: CoverLetterRequest,
    engine: CoverLetterEngine = Depends(get_cover_letter_engine),
):
    """AI-drafted letter; falls back to a fixed letter when no backend answers."""
    letter = await engine.generate_cover_letter(req)
    return CoverLetterResponse(success=True, cover_letter=letter)


@router.post("/template", response_model=CoverLetterParts)
async def template_cover_letter(
    req: CoverLetterTemplateRequest,
    engine: CoverLetterEngine = Depends(get_cover_letter_engine),
):
    """Deterministic letter assembled from resume data, tone, focus and length."""
    return engine.build_template_cover_letter(req)


@router.post("/enhance")
async def enhance_cover_letter(
    req: CoverLetterEnhanceRequest,
    engine: CoverLetterEngine = Depends(get_cover_letter_engine),
):
    if not req.content or not req.content.strip():
        raise HTTPException(status_code=400, detail="Content is required for enhancement")
    return {"success": True, "enhancedContent": engine.enhance_cover_letter_content(req.content)}
