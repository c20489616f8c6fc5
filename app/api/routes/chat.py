from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_llm_client
from ..schemas import ChatRequest, ErrorOut
from ...conversation.orchestrator import handle_chat
from ...core.errors import InvalidInput, UpstreamError
from ...llm.openai_client import OpenAIClient
from ...models import ChatReply

router = APIRouter(prefix="/api", tags=["chat"])

@router.post("/chat", response_model=ChatReply, responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}})
async def chat(payload: ChatRequest, client: OpenAIClient | None = Depends(get_llm_client)):
    try:
        return await handle_chat([m.model_dump(mode="json") for m in payload.messages], client)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamError as e:
        raise HTTPException(status_code=500, detail=e.message or "Chat failed")
