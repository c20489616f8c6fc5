from fastapi import APIRouter, Depends
from ..deps import get_llm_client
from ...core.config import settings
from ...llm.openai_client import OpenAIClient

router = APIRouter(tags=["misc"])

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/version")
def version():
    return {"version": settings.API_VERSION}

@router.get("/config/app")
def app_config(client: OpenAIClient | None = Depends(get_llm_client)):
    return {"chatEnabled": True, "screeningEnabled": True, "aiEnabled": client is not None}
