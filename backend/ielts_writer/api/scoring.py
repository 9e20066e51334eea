"""Essay validation (AI scoring) endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict

from ielts_writer.application.scoring_app_service import ScoringAppService
from ielts_writer.api.serializers import serialize_evaluation
from ielts_writer.container import get_scoring_app_service
from ielts_writer.domain.scoring.rules import EMPTY_ESSAY, ESSAY_TOO_SHORT, MISSING_PROMPT

router = APIRouter(prefix="/api", tags=["scoring"])

# Failures the writer can fix; everything else is an oracle problem
_CLIENT_ERRORS = {EMPTY_ESSAY, ESSAY_TOO_SHORT, MISSING_PROMPT}

SCORING_FAILED_MESSAGE = "Failed to validate essay with AI"


class ValidateEssayBody(BaseModel):
    model_config = ConfigDict(strict=True)

    content: str
    prompt: str


@router.post("/validate-essay")
def validate_essay(
    body: ValidateEssayBody,
    svc: ScoringAppService = Depends(get_scoring_app_service),
):
    result = svc.validate_essay(body.content, body.prompt)
    if result.is_success:
        return serialize_evaluation(result.value)
    if result.code in _CLIENT_ERRORS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    # Detail was already logged by the scorer
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=SCORING_FAILED_MESSAGE)
