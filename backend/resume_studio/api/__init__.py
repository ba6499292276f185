from resume_studio.api import (
    enhance_routes,
    ai_routes,
    trades_routes,
    cover_letter_routes,
    llm_routes,
)

__all__ = [
    "enhance_routes",
    "ai_routes",
    "trades_routes",
    "cover_letter_routes",
    "llm_routes",
]
