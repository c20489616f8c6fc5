import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from .openai_client import OpenAIClient
from .prompts import JSON_ONLY_SYSTEM, ASSESSMENT_INSTRUCTIONS
from ..core.config import settings
from ..core.errors import UpstreamMalformedOutput
from ..models import RiskAssessment

logger = logging.getLogger(__name__)

def build_assessment_messages(answers: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    prompt = "\n".join([
        ASSESSMENT_INSTRUCTIONS,
        json.dumps(answers, ensure_ascii=False, separators=(",", ":")),
    ])
    return [
        {"role":"system","content":JSON_ONLY_SYSTEM},
        {"role":"user","content":prompt},
    ]

def parse_assessment(raw: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.error("AI JSON parse failed: %s", raw)
        raise UpstreamMalformedOutput("AI response was not valid JSON", raw=raw)
    # The schema is requested in the prompt; check it here as well.
    try:
        return RiskAssessment.model_validate(parsed).model_dump(mode="json")
    except ValidationError as exc:
        logger.error("AI JSON did not match the assessment schema: %s (%s)", raw, exc.errors())
        raise UpstreamMalformedOutput("AI response was not valid JSON", raw=raw)

async def assess(client: OpenAIClient, answers: List[Dict[str, Any]]) -> Dict[str, Any]:
    raw = await client.chat_completion(
        build_assessment_messages(answers),
        temperature=settings.ASSESSMENT_TEMPERATURE,
        response_format={"type":"json_object"},
    )
    # an empty completion is treated like an empty object, which fails validation
    return parse_assessment(raw or "{}")
