from fastapi import APIRouter, Depends, HTTPException

from resume_studio.models.trades_models import TradeEnhanceRequest, TradeEnhanceResponse
from resume_studio.services.trades_enhancer import TradesEnhancer, enhance_trade_text
from resume_studio.utils.dependencies import get_trades_enhancer

router = APIRouter()


@router.post("/enhance", response_model=TradeEnhanceResponse)
async def trades_enhance(
    req: TradeEnhanceRequest,
    enhancer: TradesEnhancer = Depends(get_trades_enhancer),
):
    """Rewrite a trade bullet; unknown trades use the construction tables."""
    if not req.text or not req.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")
    return enhance_trade_text(req.text, req.trade, enhancer)
