"""Application services — orchestrate repository calls for essays and prompts."""
from __future__ import annotations
from typing import List, Optional

from ielts_writer.domain.common.result import Result
from ielts_writer.domain.essay.models import Essay, Prompt
from ielts_writer.persistence.interfaces.essay_repository import EssayRepository, PromptRepository

NOT_FOUND = "not_found"


class EssayAppService:
    def __init__(self, repo: EssayRepository):
        self._repo = repo

    # ------------------------------------------------------------------
    # CREATE
    # ------------------------------------------------------------------
    def create_essay(self, data: dict) -> Essay:
        return self._repo.create(data)

    # ------------------------------------------------------------------
    # READ
    # ------------------------------------------------------------------
    def get_essay(self, essay_id: int) -> Optional[Essay]:
        return self._repo.get(essay_id)

    def list_essays(self) -> List[Essay]:
        return self._repo.list_all()

    # ------------------------------------------------------------------
    # UPDATE
    # ------------------------------------------------------------------
    def update_essay(self, essay_id: int, changes: dict) -> Result[Essay]:
        essay = self._repo.update(essay_id, changes)
        if essay is None:
            return Result.fail("Essay not found", code=NOT_FOUND)
        return Result.ok(essay)

    # ------------------------------------------------------------------
    # DELETE
    # ------------------------------------------------------------------
    def delete_essay(self, essay_id: int) -> Result[bool]:
        if not self._repo.delete(essay_id):
            return Result.fail("Essay not found", code=NOT_FOUND)
        return Result.ok(True)


class PromptAppService:
    def __init__(self, repo: PromptRepository):
        self._repo = repo

    def get_prompt(self, prompt_id: int) -> Optional[Prompt]:
        return self._repo.get(prompt_id)

    def list_prompts(self, category: Optional[str] = None) -> List[Prompt]:
        if category:
            return self._repo.list_by_category(category)
        return self._repo.list_all()
