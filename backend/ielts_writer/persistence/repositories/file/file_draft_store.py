"""File-backed DraftStore — one UTF-8 text file per key."""
from __future__ import annotations
import os
import re
from typing import Optional

from ielts_writer.persistence.interfaces.draft_store import DraftStore

_UNSAFE = re.compile(r"[^A-Za-z0-9_.-]")


class FileDraftStore(DraftStore):

    def __init__(self, directory: str):
        self._directory = directory

    def _path(self, key: str) -> str:
        return os.path.join(self._directory, f"{_UNSAFE.sub('_', key)}.txt")

    def load(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def save(self, key: str, content: str) -> None:
        os.makedirs(self._directory, exist_ok=True)
        path = self._path(key)
        tmp_path = path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)

    def clear(self, key: str) -> None:
        path = self._path(key)
        if os.path.exists(path):
            os.remove(path)
