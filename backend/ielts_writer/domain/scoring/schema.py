"""Evaluation result schema shared by the scorer, the API and the editor client.

The aliases are the JSON keys the oracle is instructed to return. Scores are
strict numbers in [0, 9]: numeric strings, booleans and out-of-range values
are rejected outright rather than coerced or clamped.
"""
from __future__ import annotations
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr

BAND_MIN = 0
BAND_MAX = 9

Band = Annotated[float, Field(strict=True, ge=BAND_MIN, le=BAND_MAX, allow_inf_nan=False)]


class EvaluationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall_score: Band = Field(alias="score")
    task_response: Band = Field(alias="taskResponse")
    coherence_cohesion: Band = Field(alias="coherenceCohesion")
    lexical_resource: Band = Field(alias="lexicalResource")
    grammatical_range: Band = Field(alias="grammaticalRange")
    feedback: StrictStr
    strengths: List[StrictStr]
    improvements: List[StrictStr]
    word_count: int = Field(alias="wordCount", ge=0, strict=True)

    @property
    def criteria_mean(self) -> float:
        return (
            self.task_response
            + self.coherence_cohesion
            + self.lexical_resource
            + self.grammatical_range
        ) / 4
