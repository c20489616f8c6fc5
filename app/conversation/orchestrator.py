"""Chooses between the remote model and the local rules for each request.

One remote call at most per request, never retried. Quota exhaustion falls
back to the local result for the same input; every other upstream failure is
raised to the route.
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Sequence
import logging

from .responder import build_local_reply
from ..core.errors import InvalidInput, UpstreamQuotaExhausted, UpstreamError
from ..llm import assessor, composer
from ..llm.openai_client import OpenAIClient
from ..models import Role
from ..rubric.engine import build_local_assessment

logger = logging.getLogger(__name__)

ROLES = {r.value for r in Role}

def _validate_answers(answers: Any) -> List[Dict[str, Any]]:
    if not isinstance(answers, Sequence) or isinstance(answers, (str, bytes)) or not answers:
        raise InvalidInput("Invalid answers")
    if not all(isinstance(a, Mapping) for a in answers):
        raise InvalidInput("Invalid answers")
    return [dict(a) for a in answers]

def _validate_messages(messages: Any) -> List[Dict[str, Any]]:
    if not isinstance(messages, Sequence) or isinstance(messages, (str, bytes)) or not messages:
        raise InvalidInput("Invalid messages")
    for m in messages:
        if not isinstance(m, Mapping) or m.get("role") not in ROLES or not isinstance(m.get("content"), str):
            raise InvalidInput("Invalid messages")
    return [{"role": m["role"], "content": m["content"]} for m in messages]

async def handle_assessment(answers: Any, client: OpenAIClient | None) -> Dict[str, Any]:
    items = _validate_answers(answers)
    if client is None:
        return build_local_assessment(items)
    try:
        return await assessor.assess(client, items)
    except UpstreamQuotaExhausted as exc:
        logger.warning("AI analysis quota exhausted, using local scoring: %s", exc.message)
        return build_local_assessment(items)
    except UpstreamError as exc:
        logger.error("AI analysis failed: %s", exc.message)
        raise

async def handle_chat(messages: Any, client: OpenAIClient | None) -> Dict[str, str]:
    history = _validate_messages(messages)
    if client is None:
        return {"reply": build_local_reply(history)}
    try:
        reply = await composer.compose(client, history)
    except UpstreamQuotaExhausted as exc:
        logger.warning("Chat quota exhausted, using local reply: %s", exc.message)
        return {"reply": build_local_reply(history)}
    except UpstreamError as exc:
        logger.error("Chat failed: %s", exc.message)
        raise
    return {"reply": reply}
