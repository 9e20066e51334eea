"""In-memory DraftStore, used when drafts should not outlive the editor process."""
from __future__ import annotations
from typing import Dict, Optional

from ielts_writer.persistence.interfaces.draft_store import DraftStore


class MemoryDraftStore(DraftStore):

    def __init__(self):
        self._slots: Dict[str, str] = {}

    def load(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def save(self, key: str, content: str) -> None:
        self._slots[key] = content

    def clear(self, key: str) -> None:
        self._slots.pop(key, None)
