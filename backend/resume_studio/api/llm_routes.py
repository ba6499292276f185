from fastapi import APIRouter, Depends

from resume_studio.services.ai_service_manager import AIServiceManager
from resume_studio.services.llm_service import get_backends_info
from resume_studio.utils.dependencies import get_ai_service_manager

router = APIRouter()


@router.get("/backends")
async def list_backends():
    """
    List the text-generation backends and whether each is configured.
    No secrets are returned.
    """
    return {"backends": get_backends_info()}


@router.get("/status")
async def service_status(manager: AIServiceManager = Depends(get_ai_service_manager)):
    """Run a tiny enhancement on every backend and the rule-based enhancer."""
    return {
        "results": await manager.test_services(),
        "availableServices": manager.get_available_services(),
    }
