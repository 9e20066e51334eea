"""Essay CRUD API endpoints."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ielts_writer.application.essay_app_service import EssayAppService
from ielts_writer.api.serializers import serialize_essay
from ielts_writer.container import get_essay_app_service

router = APIRouter(prefix="/api/essays", tags=["essays"])


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class EssayCreateBody(BaseModel):
    model_config = ConfigDict(strict=True)

    title: str
    content: str
    prompt: str
    word_count: int = Field(default=0, ge=0)
    time_spent: int = Field(default=0, ge=0)


class EssayUpdateBody(BaseModel):
    model_config = ConfigDict(strict=True)

    title: Optional[str] = None
    content: Optional[str] = None
    prompt: Optional[str] = None
    word_count: Optional[int] = Field(default=None, ge=0)
    time_spent: Optional[int] = Field(default=None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value):
        # Omit a field to leave it unchanged; null is not a value any field accepts
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value


# ------------------------------------------------------------------
# Essay endpoints
# ------------------------------------------------------------------
@router.get("")
def list_essays(svc: EssayAppService = Depends(get_essay_app_service)):
    return [serialize_essay(e) for e in svc.list_essays()]


@router.get("/{essay_id}")
def get_essay(essay_id: int, svc: EssayAppService = Depends(get_essay_app_service)):
    essay = svc.get_essay(essay_id)
    if not essay:
        raise HTTPException(status_code=404, detail="Essay not found")
    return serialize_essay(essay)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_essay(body: EssayCreateBody, svc: EssayAppService = Depends(get_essay_app_service)):
    return serialize_essay(svc.create_essay(body.model_dump()))


@router.patch("/{essay_id}")
def update_essay(
    essay_id: int,
    body: EssayUpdateBody,
    svc: EssayAppService = Depends(get_essay_app_service),
):
    result = svc.update_essay(essay_id, body.model_dump(exclude_unset=True))
    if not result.is_success:
        raise HTTPException(status_code=404, detail=result.error)
    return serialize_essay(result.value)


@router.delete("/{essay_id}")
def delete_essay(essay_id: int, svc: EssayAppService = Depends(get_essay_app_service)):
    result = svc.delete_essay(essay_id)
    if not result.is_success:
        raise HTTPException(status_code=404, detail=result.error)
    return {"message": "Essay deleted successfully"}
