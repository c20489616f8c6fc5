from fastapi import Request
from ..llm.openai_client import OpenAIClient

def get_llm_client(request: Request) -> OpenAIClient | None:
    # built once at startup; None when no API key is configured
    return getattr(request.app.state, "llm_client", None)
