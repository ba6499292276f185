from pydantic import BaseModel
from typing import Optional


class TradeEnhanceRequest(BaseModel):
    """Body of POST /api/trades/enhance."""

    text: str = ""
    trade: Optional[str] = None


class TradeEnhancement(BaseModel):
    """Rewrite of one trade bullet."""

    original: str
    enhanced: str
    improvements: list[str] = []
    metrics: list[str] = []


class TradeSuggestions(BaseModel):
    improvements: list[str] = []
    metrics: list[str] = []
    skills: list[str] = []
    certifications: list[str] = []


class TradeEnhanceResponse(BaseModel):
    success: bool
    original: str
    enhanced: str
    suggestions: TradeSuggestions
