"""Background thread that feeds real seconds into a CountdownTimer."""
from __future__ import annotations
import threading
from typing import Callable, Optional

from ielts_writer.domain.editor.timer import CountdownTimer


class CountdownClock:

    def __init__(
        self,
        timer: CountdownTimer,
        interval: float = 1.0,
        on_expired: Optional[Callable[[], None]] = None,
    ):
        self._timer = timer
        self._interval = interval
        self._on_expired = on_expired
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        # Guards timer state between this thread and the input loop
        self.lock = threading.Lock()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="countdown-clock", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self._interval * 2)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            with self.lock:
                was_running = self._timer.is_running
                self._timer.tick()
                expired = was_running and self._timer.is_expired
            if expired and self._on_expired is not None:
                self._on_expired()
