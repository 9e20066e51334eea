"""Domain objects → JSON-ready dicts."""
from __future__ import annotations

from ielts_writer.domain.essay.models import Essay, Prompt
from ielts_writer.domain.scoring.schema import EvaluationResult


def serialize_essay(e: Essay) -> dict:
    return {
        "id": e.id,
        "title": e.title,
        "content": e.content,
        "prompt": e.prompt,
        "word_count": e.word_count,
        "time_spent": e.time_spent,
        "created_at": e.created_at.isoformat(),
        "updated_at": e.updated_at.isoformat(),
    }


def serialize_prompt(p: Prompt) -> dict:
    return {
        "id": p.id,
        "category": p.category,
        "title": p.title,
        "content": p.content,
        "difficulty": p.difficulty,
        "time_limit": p.time_limit,
    }


def serialize_evaluation(r: EvaluationResult) -> dict:
    return r.model_dump()
