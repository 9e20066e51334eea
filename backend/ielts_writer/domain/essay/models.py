"""Essay and prompt domain models — pure Python, no storage or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

# Valid prompt difficulty values
DIFFICULTIES = ("beginner", "intermediate", "advanced")

# Fields a caller may set on an essay; id and timestamps are store-managed
ESSAY_FIELDS = ("title", "content", "prompt", "word_count", "time_spent")


@dataclass(frozen=True)
class Essay:
    id: int
    title: str
    content: str
    prompt: str
    word_count: int
    time_spent: int  # seconds
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Prompt:
    id: int
    category: str
    title: str
    content: str
    difficulty: str  # beginner | intermediate | advanced
    time_limit: int = 40  # minutes
