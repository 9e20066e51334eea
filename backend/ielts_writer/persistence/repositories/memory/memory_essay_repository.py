"""In-memory implementations of EssayRepository and PromptRepository.

Volatile by design: a process restart drops every essay and re-seeds prompts.
"""
from __future__ import annotations
import itertools
import threading
from typing import Dict, Iterable, List, Optional

from ielts_writer.domain.essay.models import Essay, Prompt
from ielts_writer.domain.essay.service import EssayDomainService
from ielts_writer.persistence.interfaces.essay_repository import EssayRepository, PromptRepository


class MemoryEssayRepository(EssayRepository):

    def __init__(self, domain: Optional[EssayDomainService] = None):
        self._domain = domain or EssayDomainService()
        self._essays: Dict[int, Essay] = {}
        # Ids start at 1 and are never handed out twice, even after deletes
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, data: dict) -> Essay:
        with self._lock:
            essay = self._domain.new_essay(next(self._ids), data)
            self._essays[essay.id] = essay
            return essay

    def get(self, essay_id: int) -> Optional[Essay]:
        with self._lock:
            return self._essays.get(essay_id)

    def list_all(self) -> List[Essay]:
        with self._lock:
            return list(self._essays.values())

    def update(self, essay_id: int, changes: dict) -> Optional[Essay]:
        with self._lock:
            essay = self._essays.get(essay_id)
            if essay is None:
                return None
            updated = self._domain.apply_update(essay, changes)
            self._essays[essay_id] = updated
            return updated

    def delete(self, essay_id: int) -> bool:
        with self._lock:
            return self._essays.pop(essay_id, None) is not None


class MemoryPromptRepository(PromptRepository):

    def __init__(self, seed: Iterable[dict] = ()):
        self._prompts: Dict[int, Prompt] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        for data in seed:
            self.create(data)

    def create(self, data: dict) -> Prompt:
        with self._lock:
            prompt = EssayDomainService.new_prompt(next(self._ids), data)
            self._prompts[prompt.id] = prompt
            return prompt

    def get(self, prompt_id: int) -> Optional[Prompt]:
        with self._lock:
            return self._prompts.get(prompt_id)

    def list_all(self) -> List[Prompt]:
        with self._lock:
            return list(self._prompts.values())

    def list_by_category(self, category: str) -> List[Prompt]:
        with self._lock:
            return [p for p in self._prompts.values() if p.category == category]
