"""Key-value slot for the editor's working draft."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional


class DraftStore(ABC):

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the stored draft, or None if the slot is empty."""
        ...

    @abstractmethod
    def save(self, key: str, content: str) -> None:
        ...

    @abstractmethod
    def clear(self, key: str) -> None:
        ...
