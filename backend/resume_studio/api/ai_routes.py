import logging

from fastapi import APIRouter, Depends, HTTPException

from resume_studio.models.enhancement_models import (
    AIEnhanceRequest,
    EnhancementContext,
    RuleBasedRequest,
    SuggestRequest,
)
from resume_studio.services.ai_service_manager import RULE_BASED, AIServiceManager
from resume_studio.services.rule_based_enhancer import RuleBasedEnhancer
from resume_studio.utils.dependencies import get_ai_service_manager, get_rule_based_enhancer
from resume_studio.utils.errors import BackendUnavailable, EnhancementError, InputError
from resume_studio.utils.text_metrics import extract_quantification

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_SUMMARY_YEARS = 3


def _require_text(text: str) -> str:
    if not text or not text.strip():
        raise HTTPException(status_code=400, detail=InputError.message)
    return text


def _http_error(error: EnhancementError) -> HTTPException:
    """Translate a typed enhancement error into the matching HTTP status."""
    return HTTPException(status_code=error.status_code, detail=error.detail)


def _context_echo(context: EnhancementContext) -> dict:
    return context.model_dump(by_alias=True, exclude_none=True, exclude_defaults=True)


def _years(context: EnhancementContext) -> float:
    return context.years_experience or DEFAULT_SUMMARY_YEARS


# ── Backend Enhancement ─────────────────────────────────────────────────────


@router.post("/enhance")
async def ai_enhance(
    req: AIEnhanceRequest,
    manager: AIServiceManager = Depends(get_ai_service_manager),
    rule_based: RuleBasedEnhancer = Depends(get_rule_based_enhancer),
):
    """
    Enhance one text with the first available backend.
    An unavailable backend falls back to rule-based enhancement; quota and
    auth failures are reported as 402 / 401.
    """
    text = _require_text(req.text)
    fallback = False
    try:
        enhanced = await manager.enhance_text(text, req.context)
    except BackendUnavailable as e:
        logger.warning(f"AI enhancement unavailable, using rule-based fallback: {e.detail}")
        enhanced = rule_based.enhance_text(text, req.context)
        fallback = True
    except EnhancementError as e:
        logger.error(f"AI enhancement failed: {type(e).__name__}: {e.detail}")
        raise _http_error(e)

    return {
        "success": True,
        "original": text,
        "enhanced": enhanced,
        "context": _context_echo(req.context),
        "fallback": fallback,
    }


@router.post("/enhance-quantify")
async def ai_enhance_quantify(
    req: AIEnhanceRequest,
    manager: AIServiceManager = Depends(get_ai_service_manager),
):
    """Backend enhancement seeded with the industry's typical metrics and team sizes."""
    text = _require_text(req.text)
    try:
        enhanced, industry_key = await manager.enhance_quantified_text(text, req.context)
    except EnhancementError as e:
        logger.error(f"Quantified enhancement failed: {type(e).__name__}: {e.detail}")
        raise _http_error(e)

    return {
        "success": True,
        "original": text,
        "enhanced": enhanced,
        "context": _context_echo(req.context),
        "industry": industry_key,
        "quantification": extract_quantification(enhanced),
    }


# ── Rule-Based Enhancement ──────────────────────────────────────────────────


@router.post("/enhance-fallback")
async def ai_enhance_fallback(
    req: AIEnhanceRequest,
    rule_based: RuleBasedEnhancer = Depends(get_rule_based_enhancer),
):
    text = _require_text(req.text)
    return {
        "success": True,
        "original": text,
        "enhanced": rule_based.enhance_text(text, req.context),
        "context": _context_echo(req.context),
        "fallback": True,
    }


@router.post("/enhance-rule-based")
async def ai_enhance_rule_based(
    req: RuleBasedRequest,
    rule_based: RuleBasedEnhancer = Depends(get_rule_based_enhancer),
):
    """Bulk, skills, summary or single-text enhancement with no backend calls."""
    ctx = req.context
    base = {"context": _context_echo(ctx), "method": RULE_BASED}

    if req.type == "bulk" and req.texts:
        return {
            "success": True,
            "original": req.texts,
            "enhanced": rule_based.enhance_multiple_texts(req.texts, ctx),
            **base,
        }

    if req.type == "skills" and ctx.job_title:
        return {
            "success": True,
            "type": "skills",
            "suggestions": rule_based.generate_skill_suggestions(ctx.job_title, ctx.industry or ""),
            **base,
        }

    if req.type == "summary" and ctx.job_title:
        summary = rule_based.generate_career_summary(ctx.job_title, _years(ctx), ctx.key_skills, ctx.industry or "")
        return {"success": True, "type": "summary", "suggestions": summary, **base}

    text = _require_text(req.text)
    return {
        "success": True,
        "original": text,
        "enhanced": rule_based.enhance_text(text, ctx),
        **base,
    }


# ── Unified Enhancement ─────────────────────────────────────────────────────


@router.post("/enhance-free")
async def ai_enhance_free(
    req: RuleBasedRequest,
    manager: AIServiceManager = Depends(get_ai_service_manager),
    rule_based: RuleBasedEnhancer = Depends(get_rule_based_enhancer),
):
    """
    Backend enhancement when one is available, rule-based otherwise.
    `service` names whichever produced the text.
    """
    ctx = req.context
    service = manager.active_backend() or RULE_BASED
    base = {"context": _context_echo(ctx), "availableServices": manager.get_available_services()}

    try:
        if req.type == "bulk" and req.texts:
            if manager.has_backend():
                enhanced = await manager.enhance_multiple_texts(
                    req.texts, ctx, on_failure=lambda t: rule_based.enhance_text(t, ctx)
                )
            else:
                enhanced = rule_based.enhance_multiple_texts(req.texts, ctx)
            return {"success": True, "original": req.texts, "enhanced": enhanced, "service": service, **base}

        if req.type == "skills" and ctx.job_title:
            try:
                suggestions = await manager.generate_skill_suggestions(
                    ctx.job_title, ctx.industry or "", ctx.experience_level
                )
            except EnhancementError as e:
                logger.warning(f"Skill suggestions fell back to rule-based: {type(e).__name__}")
                suggestions, service = rule_based.generate_skill_suggestions(ctx.job_title, ctx.industry or ""), RULE_BASED
            return {"success": True, "type": "skills", "suggestions": suggestions, "service": service, **base}

        if req.type == "summary" and ctx.job_title:
            try:
                summary = await manager.generate_career_summary(
                    ctx.job_title, _years(ctx), ctx.key_skills, ctx.industry or ""
                )
            except EnhancementError as e:
                logger.warning(f"Career summary fell back to rule-based: {type(e).__name__}")
                summary = rule_based.generate_career_summary(ctx.job_title, _years(ctx), ctx.key_skills, ctx.industry or "")
                service = RULE_BASED
            return {"success": True, "type": "summary", "suggestions": summary, "service": service, **base}

        text = _require_text(req.text)
        try:
            enhanced_text = await manager.enhance_text(text, ctx)
        except EnhancementError as e:
            logger.warning(f"Enhancement fell back to rule-based: {type(e).__name__}")
            enhanced_text, service = rule_based.enhance_text(text, ctx), RULE_BASED
        return {"success": True, "original": text, "enhanced": enhanced_text, "service": service, **base}

    except HTTPException:
        raise
    except Exception:
        logger.exception("Unified enhancement failed")
        raise HTTPException(status_code=500, detail="Failed to enhance text. Please try again later.")


@router.get("/enhance-free")
async def ai_enhance_free_status(manager: AIServiceManager = Depends(get_ai_service_manager)):
    return {
        "success": True,
        "serviceStatus": manager.get_service_status(),
        "availableServices": manager.get_available_services(),
    }


# ── Suggestions ─────────────────────────────────────────────────────────────


@router.post("/suggest")
async def ai_suggest(
    req: SuggestRequest,
    manager: AIServiceManager = Depends(get_ai_service_manager),
):
    """Skills (max 10), a summary paragraph, or achievements (max 6) from the backend."""
    ctx = req.context
    try:
        if req.type == "skills":
            suggestions = await manager.generate_skill_suggestions(
                ctx.job_title or "", ctx.industry or "", ctx.experience_level
            )
        elif req.type == "summary":
            suggestions = await manager.generate_career_summary(
                ctx.job_title or "", ctx.years_experience, ctx.key_skills, ctx.industry or ""
            )
        else:
            suggestions = await manager.generate_achievements(
                ctx.job_title or "", ctx.company_name, ctx.responsibilities
            )
    except EnhancementError as e:
        logger.error(f"Suggestion ({req.type}) failed: {type(e).__name__}: {e.detail}")
        raise _http_error(e)

    return {
        "success": True,
        "type": req.type,
        "suggestions": suggestions,
        "context": ctx.model_dump(by_alias=True, exclude_none=True),
    }
