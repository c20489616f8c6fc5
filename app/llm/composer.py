from typing import Any, Dict, List

from .openai_client import OpenAIClient
from .prompts import CHAT_SYSTEM
from ..core.config import settings

def build_chat_messages(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{"role":"system","content":CHAT_SYSTEM}, *messages]

async def compose(client: OpenAIClient, messages: List[Dict[str, Any]]) -> str:
    # no response_format: the reply is free text
    return await client.chat_completion(
        build_chat_messages(messages),
        temperature=settings.CHAT_TEMPERATURE,
    )
