"""Submission checks that must pass before an essay is sent to the scoring oracle."""
from __future__ import annotations
from ielts_writer.domain.common.result import Result
from ielts_writer.domain.editor.text_stats import count_words

MIN_ESSAY_WORDS = 250

# Largest gap between the reported overall score and the criteria mean that
# still counts as consistent (IELTS rounds to the nearest half band)
OVERALL_TOLERANCE = 0.5

EMPTY_ESSAY = "empty_essay"
ESSAY_TOO_SHORT = "essay_too_short"
MISSING_PROMPT = "missing_prompt"


def validate_submission(content: str, prompt: str) -> Result[int]:
    """
    Returns Result.ok(word_count) when the essay may be scored,
    otherwise Result.fail(reason, code).
    """
    if not (content or "").strip():
        return Result.fail("Please write your essay before submitting for validation", code=EMPTY_ESSAY)

    words = count_words(content)
    if words < MIN_ESSAY_WORDS:
        return Result.fail(
            f"Your essay should be at least {MIN_ESSAY_WORDS} words for IELTS Task 2 "
            f"({words} words so far)",
            code=ESSAY_TOO_SHORT,
        )

    if not (prompt or "").strip():
        return Result.fail("An essay prompt is required for validation", code=MISSING_PROMPT)

    return Result.ok(words)


def overall_is_consistent(overall: float, criteria_mean: float) -> bool:
    return abs(overall - criteria_mean) <= OVERALL_TOLERANCE
