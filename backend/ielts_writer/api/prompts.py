"""Prompt catalog API endpoints (read-only)."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ielts_writer.application.essay_app_service import PromptAppService
from ielts_writer.api.serializers import serialize_prompt
from ielts_writer.container import get_prompt_app_service

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


@router.get("")
def list_prompts(
    category: Optional[str] = Query(default=None),
    svc: PromptAppService = Depends(get_prompt_app_service),
):
    return [serialize_prompt(p) for p in svc.list_prompts(category)]


@router.get("/{prompt_id}")
def get_prompt(prompt_id: int, svc: PromptAppService = Depends(get_prompt_app_service)):
    prompt = svc.get_prompt(prompt_id)
    if not prompt:
        raise HTTPException(status_code=404, detail="Prompt not found")
    return serialize_prompt(prompt)
