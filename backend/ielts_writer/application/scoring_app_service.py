"""Application service — submission checks first, then the scorer."""
from __future__ import annotations
import logging

from ielts_writer.application.essay_scorer import EssayScorer
from ielts_writer.domain.common.result import Result
from ielts_writer.domain.scoring.rules import validate_submission
from ielts_writer.domain.scoring.schema import EvaluationResult

logger = logging.getLogger(__name__)


class ScoringAppService:
    def __init__(self, scorer: EssayScorer):
        self._scorer = scorer

    def validate_essay(self, content: str, prompt: str) -> Result[EvaluationResult]:
        check = validate_submission(content, prompt)
        if not check.is_success:
            return check
        logger.info("Scoring essay of %d words", check.value)
        return self._scorer.score(content, prompt)
