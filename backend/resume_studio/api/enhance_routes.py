import logging

from fastapi import APIRouter, Depends, HTTPException

from resume_studio.models.enhancement_models import (
    EnhancementRequest,
    EnhancementResult,
    KeywordEnhanceRequest,
)
from resume_studio.services.enhancement_engine import EnhancementEngine
from resume_studio.services.keyword_bank import KeywordBank
from resume_studio.utils.dependencies import get_enhancement_engine, get_keyword_bank
from resume_studio.utils.industry import keyword_industry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def keyword_enhance(
    req: KeywordEnhanceRequest,
    bank: KeywordBank = Depends(get_keyword_bank),
):
    """
    Keyword-bank endpoint.
    `type="search"` searches the dictionaries, `type="quantify"` returns
    numeric fill-ins, and no type rewrites the text.
    """
    if not req.text or not req.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")

    industry = req.industry or "general"

    if req.type == "search":
        return {
            "success": True,
            "type": "search",
            "query": req.text,
            "results": bank.search_keywords(req.text, req.industry),
        }

    if req.type == "quantify":
        return {
            "success": True,
            "type": "quantification",
            "suggestions": bank.get_quantification_suggestions(industry, req.text),
        }

    result = bank.enhance_text(req.text, industry, req.level or "entry")
    return {
        "success": True,
        "type": "enhancement",
        "original": req.text,
        "enhanced": result.enhanced,
        "improvements": result.improvements,
        "suggestions": result.suggestions.model_dump(by_alias=True),
        "quantificationOptions": bank.get_quantification_suggestions(industry, req.text),
        "detectedIndustry": keyword_industry(req.industry) or "general",
        "confidence": result.confidence,
    }


@router.post("/engine", response_model=EnhancementResult)
async def engine_enhance(
    req: EnhancementRequest,
    engine: EnhancementEngine = Depends(get_enhancement_engine),
):
    """Full enhancement: rewrite, alternatives, quantification prompts and confidence."""
    text = req.source_text
    if not text.strip():
        raise HTTPException(status_code=400, detail="Text is required for enhancement")
    return await engine.enhance(text, req.industry, req.role_level, req.context)
