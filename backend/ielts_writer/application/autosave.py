"""Debounced auto-save of the editor draft into a DraftStore slot."""
from __future__ import annotations
import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from ielts_writer.persistence.interfaces.draft_store import DraftStore

logger = logging.getLogger(__name__)

DEFAULT_DRAFT_KEY = "ielts-essay-content"
DEFAULT_DELAY_SECONDS = 2.0


class AutoSaveChannel:
    """
    Each on_change() cancels the pending write and schedules a new one, so a
    burst of edits produces a single write of the latest content once input
    has been quiet for `delay` seconds.
    """

    def __init__(
        self,
        store: DraftStore,
        key: str = DEFAULT_DRAFT_KEY,
        delay: float = DEFAULT_DELAY_SECONDS,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._key = key
        self._delay = delay
        self._timer_factory = timer_factory
        self._clock = clock
        self._pending: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()
        self.last_saved: Optional[datetime] = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def load(self) -> str:
        return self._store.load(self._key) or ""

    def on_change(self, content: str) -> None:
        with self._lock:
            self._cancel_pending()
            timer = self._timer_factory(self._delay, self._fire, args=(self._generation, content))
            timer.daemon = True
            self._pending = timer
            timer.start()

    def save_now(self, content: str) -> bool:
        """Explicit save. Returns False when there was nothing worth writing."""
        with self._lock:
            self._cancel_pending()
            return self._write(content)

    def clear(self) -> None:
        """Drop any pending write and empty the slot."""
        with self._lock:
            self._cancel_pending()
            self._store.clear(self._key)
            self.last_saved = None

    def close(self) -> None:
        with self._lock:
            self._cancel_pending()

    def last_saved_label(self) -> str:
        if self.last_saved is None:
            return "never"
        return f"at {self.last_saved:%H:%M}"

    def _fire(self, generation: int, content: str) -> None:
        # Generation check and write are atomic with respect to save_now() and clear()
        with self._lock:
            if generation != self._generation:
                return
            self._pending = None
            self._write(content)

    def _write(self, content: str) -> bool:
        # Caller holds self._lock
        if not content.strip():
            return False
        self._store.save(self._key, content)
        self.last_saved = self._clock()
        logger.debug("Draft %r saved (%d chars)", self._key, len(content))
        return True

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
