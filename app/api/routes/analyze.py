from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_llm_client
from ..schemas import AssessmentRequest, ErrorOut
from ...conversation.orchestrator import handle_assessment
from ...core.errors import InvalidInput, UpstreamError
from ...llm.openai_client import OpenAIClient
from ...models import RiskAssessment

router = APIRouter(prefix="/api", tags=["assessment"])

@router.post("/analyze", response_model=RiskAssessment, responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}})
async def analyze(payload: AssessmentRequest, client: OpenAIClient | None = Depends(get_llm_client)):
    answers = [a.model_dump(exclude_unset=True) for a in payload.answers]
    try:
        return await handle_assessment(answers, client)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamError as e:
        raise HTTPException(status_code=500, detail=e.message or "AI analysis failed")
