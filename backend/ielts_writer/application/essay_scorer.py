"""Essay scoring: oracle call, JSON parse, schema validation.

Every failure is returned as a Result with one of the codes below; nothing is
retried and no partial result ever reaches the caller.
"""
from __future__ import annotations
import json
import logging

from pydantic import ValidationError

from ielts_writer.domain.common.result import Result
from ielts_writer.domain.scoring.instructions import build_examiner_instructions
from ielts_writer.domain.scoring.rules import overall_is_consistent
from ielts_writer.domain.scoring.schema import EvaluationResult
from ielts_writer.integrations.interfaces.scoring_oracle import OracleError, ScoringOracle

logger = logging.getLogger(__name__)

ORACLE_UNAVAILABLE = "oracle_unavailable"
INVALID_ORACLE_RESPONSE = "invalid_oracle_response"
SCHEMA_VALIDATION_FAILED = "schema_validation_failed"


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{field}: {first['msg']}"


class EssayScorer:
    def __init__(self, oracle: ScoringOracle):
        self._oracle = oracle

    def score(self, essay_text: str, prompt_text: str) -> Result[EvaluationResult]:
        instructions = build_examiner_instructions(prompt_text)

        try:
            raw = self._oracle.complete(instructions, essay_text)
        except OracleError as e:
            logger.error("Scoring oracle call failed: %s", e)
            return Result.fail(f"Scoring oracle call failed: {e}", code=ORACLE_UNAVAILABLE)

        try:
            payload = json.loads(raw)
        except ValueError as e:
            logger.error("Invalid oracle response (not JSON): %s | %.200r", e, raw)
            return Result.fail("Invalid oracle response: reply is not valid JSON", code=INVALID_ORACLE_RESPONSE)
        if not isinstance(payload, dict):
            logger.error("Invalid oracle response (not an object): %.200r", raw)
            return Result.fail("Invalid oracle response: expected a JSON object", code=INVALID_ORACLE_RESPONSE)

        try:
            evaluation = EvaluationResult.model_validate(payload)
        except ValidationError as e:
            detail = _describe_validation_error(e)
            logger.error("Oracle evaluation failed schema validation: %s", detail)
            return Result.fail(f"Schema validation failed: {detail}", code=SCHEMA_VALIDATION_FAILED)

        # The reported overall is trusted; a mismatch is only worth a warning
        if not overall_is_consistent(evaluation.overall_score, evaluation.criteria_mean):
            logger.warning(
                "Oracle overall score %.2f differs from criteria mean %.2f",
                evaluation.overall_score,
                evaluation.criteria_mean,
            )
        return Result.ok(evaluation)
