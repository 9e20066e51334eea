"""Word, character and paragraph counts for the editor draft."""
from __future__ import annotations
import re
from dataclasses import dataclass

# One or more blank lines; a "blank" line may still hold spaces or tabs
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

# Task 2 target band shown next to the word count
TARGET_MIN_WORDS = 250
TARGET_WORDS = 300


@dataclass(frozen=True)
class TextStats:
    word_count: int
    char_count: int
    paragraph_count: int

    @property
    def target_progress(self) -> float:
        """Percent of the way to TARGET_WORDS, capped at 100."""
        return min(self.word_count / TARGET_WORDS * 100, 100.0)

    @property
    def in_target_range(self) -> bool:
        return TARGET_MIN_WORDS <= self.word_count <= TARGET_WORDS


def count_words(text: str) -> int:
    return len(text.split())


def count_paragraphs(text: str) -> int:
    if not text.strip():
        return 0
    return sum(1 for block in _PARAGRAPH_BREAK.split(text) if block.strip())


def compute_text_stats(text: str) -> TextStats:
    return TextStats(
        word_count=count_words(text),
        char_count=len(text),
        paragraph_count=count_paragraphs(text),
    )
