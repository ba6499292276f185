import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_studio.config import settings
from resume_studio.api import (
    enhance_routes,
    ai_routes,
    trades_routes,
    cover_letter_routes,
    llm_routes,
)
from resume_studio.services.ai_service_manager import AIServiceManager
from resume_studio.utils.dependencies import get_ai_service_manager

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

VERSION = "0.1.0"

app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="Resume and cover-letter text enhancement service",
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(enhance_routes.router, prefix="/api/enhance", tags=["Keyword Enhancement"])
app.include_router(ai_routes.router, prefix="/api/ai", tags=["AI Enhancement"])
app.include_router(trades_routes.router, prefix="/api/trades", tags=["Trades"])
app.include_router(cover_letter_routes.router, prefix="/api/cover-letter", tags=["Cover Letters"])
app.include_router(llm_routes.router, prefix="/api/llm", tags=["LLM"])

# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check(manager: AIServiceManager = Depends(get_ai_service_manager)):
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": VERSION,
        "services": {
            "ruleBasedEnhancement": True,
            "aiEnhancement": manager.has_backend(),
        },
    }
