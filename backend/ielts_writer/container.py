"""Dependency injection container — wires implementations to interfaces.

One Container is built per application instance and kept on ``app.state``;
route dependencies resolve services from it, never from module globals.
"""
from __future__ import annotations
from typing import Optional

from fastapi import Request

from ielts_writer.application.essay_app_service import EssayAppService, PromptAppService
from ielts_writer.application.essay_scorer import EssayScorer
from ielts_writer.application.scoring_app_service import ScoringAppService
from ielts_writer.domain.catalog.seed import DEFAULT_PROMPTS
from ielts_writer.integrations.interfaces.scoring_oracle import ScoringOracle
from ielts_writer.integrations.openrouter.openrouter_oracle import OpenRouterOracle
from ielts_writer.persistence.interfaces.essay_repository import EssayRepository, PromptRepository
from ielts_writer.persistence.repositories.memory.memory_essay_repository import (
    MemoryEssayRepository,
    MemoryPromptRepository,
)


class Container:
    def __init__(
        self,
        essay_repo: EssayRepository,
        prompt_repo: PromptRepository,
        oracle: ScoringOracle,
    ):
        self.essay_repo = essay_repo
        self.prompt_repo = prompt_repo
        self.oracle = oracle
        self.essay_service = EssayAppService(repo=essay_repo)
        self.prompt_service = PromptAppService(repo=prompt_repo)
        self.scoring_service = ScoringAppService(scorer=EssayScorer(oracle))

    def close(self) -> None:
        self.oracle.close()


def build_container(
    essay_repo: Optional[EssayRepository] = None,
    prompt_repo: Optional[PromptRepository] = None,
    oracle: Optional[ScoringOracle] = None,
) -> Container:
    return Container(
        essay_repo=essay_repo or MemoryEssayRepository(),
        prompt_repo=prompt_repo or MemoryPromptRepository(seed=DEFAULT_PROMPTS),
        oracle=oracle or OpenRouterOracle(),
    )


# ------------------------------------------------------------------
# FastAPI dependencies
# ------------------------------------------------------------------
def get_container(request: Request) -> Container:
    return request.app.state.container


def get_essay_app_service(request: Request) -> EssayAppService:
    return get_container(request).essay_service


def get_prompt_app_service(request: Request) -> PromptAppService:
    return get_container(request).prompt_service


def get_scoring_app_service(request: Request) -> ScoringAppService:
    return get_container(request).scoring_service
