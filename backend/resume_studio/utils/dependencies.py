"""
Process-wide service instances, injected into routes with FastAPI `Depends`.

Tests swap any of them through `app.dependency_overrides`.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from resume_studio.services.ai_service_manager import AIServiceManager
from resume_studio.services.cover_letter_service import CoverLetterEngine
from resume_studio.services.enhancement_engine import EnhancementEngine
from resume_studio.services.keyword_bank import KeywordBank
from resume_studio.services.rule_based_enhancer import RuleBasedEnhancer
from resume_studio.services.trades_enhancer import TradesEnhancer


@lru_cache
def get_rule_based_enhancer() -> RuleBasedEnhancer:
    return RuleBasedEnhancer()


@lru_cache
def get_keyword_bank() -> KeywordBank:
    return KeywordBank()


@lru_cache
def get_trades_enhancer() -> TradesEnhancer:
    return TradesEnhancer()


@lru_cache
def _shared_ai_service_manager() -> AIServiceManager:
    return AIServiceManager(rule_based=get_rule_based_enhancer())


async def get_ai_service_manager() -> AIServiceManager:
    """The shared manager, initialized on first use."""
    manager = _shared_ai_service_manager()
    await manager.initialize()
    return manager


async def get_enhancement_engine(
    ai_manager: AIServiceManager = Depends(get_ai_service_manager),
) -> EnhancementEngine:
    return EnhancementEngine(ai_manager)


async def get_cover_letter_engine(
    ai_manager: AIServiceManager = Depends(get_ai_service_manager),
) -> CoverLetterEngine:
    return CoverLetterEngine(ai_manager)
