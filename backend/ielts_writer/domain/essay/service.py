"""Domain service — builds essay records and derives updated copies. No I/O; repositories persist the output."""
from __future__ import annotations
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ielts_writer.domain.essay.models import ESSAY_FIELDS, Essay, Prompt


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EssayDomainService:
    """
    Stamps timestamps and merges partial updates.
    The clock is injectable so tests can pin or freeze time.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or _utcnow

    def new_essay(self, essay_id: int, data: dict) -> Essay:
        now = self._clock()
        return Essay(
            id=essay_id,
            title=data["title"],
            content=data["content"],
            prompt=data["prompt"],
            word_count=data.get("word_count", 0),
            time_spent=data.get("time_spent", 0),
            created_at=now,
            updated_at=now,
        )

    def apply_update(self, essay: Essay, changes: dict) -> Essay:
        """Return a copy with only the given fields changed and updated_at moved forward."""
        fields = {k: v for k, v in changes.items() if k in ESSAY_FIELDS}
        now = self._clock()
        # Two updates inside one clock tick must still order strictly
        if now <= essay.updated_at:
            now = essay.updated_at + timedelta(microseconds=1)
        return replace(essay, updated_at=now, **fields)

    @staticmethod
    def new_prompt(prompt_id: int, data: dict) -> Prompt:
        return Prompt(
            id=prompt_id,
            category=data["category"],
            title=data["title"],
            content=data["content"],
            difficulty=data["difficulty"],
            time_limit=data.get("time_limit", 40),
        )
