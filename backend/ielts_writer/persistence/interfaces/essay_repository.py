"""Abstract repository interfaces for essays and prompts."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from ielts_writer.domain.essay.models import Essay, Prompt


class EssayRepository(ABC):

    @abstractmethod
    def create(self, data: dict) -> Essay:
        """Assign the next id, stamp created_at/updated_at, store and return the record."""
        ...

    @abstractmethod
    def get(self, essay_id: int) -> Optional[Essay]:
        """Return the essay, or None if the id is unknown. Never raises for a missing id."""
        ...

    @abstractmethod
    def list_all(self) -> List[Essay]:
        """Return all essays in insertion order."""
        ...

    @abstractmethod
    def update(self, essay_id: int, changes: dict) -> Optional[Essay]:
        """Merge only the given fields, refresh updated_at. None if the id is unknown."""
        ...

    @abstractmethod
    def delete(self, essay_id: int) -> bool:
        """Remove the essay. Returns False if there was nothing to remove."""
        ...


class PromptRepository(ABC):

    @abstractmethod
    def create(self, data: dict) -> Prompt:
        """Assign the next prompt id (own counter, independent of essays) and store."""
        ...

    @abstractmethod
    def get(self, prompt_id: int) -> Optional[Prompt]:
        ...

    @abstractmethod
    def list_all(self) -> List[Prompt]:
        ...

    @abstractmethod
    def list_by_category(self, category: str) -> List[Prompt]:
        """Exact, case-sensitive category match in creation order."""
        ...
