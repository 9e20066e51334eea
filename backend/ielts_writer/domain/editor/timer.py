"""Countdown timer state machine — idle → running ⇄ paused, reset from anywhere."""
from __future__ import annotations

IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"

DEFAULT_SECONDS = 1200  # 20 minutes


class CountdownTimer:
    """
    Pure state; something else supplies the seconds via tick().
    Reaching zero pauses the timer and clamps remaining time at zero.
    """

    def __init__(self, initial_seconds: int = DEFAULT_SECONDS):
        if initial_seconds < 0:
            raise ValueError("initial_seconds must be >= 0")
        self._initial = initial_seconds
        self._remaining = initial_seconds
        self._state = IDLE

    @property
    def initial_seconds(self) -> int:
        return self._initial

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def elapsed(self) -> int:
        return self._initial - self._remaining

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == RUNNING

    @property
    def is_expired(self) -> bool:
        return self._remaining == 0

    @property
    def minutes(self) -> int:
        return self._remaining // 60

    @property
    def seconds(self) -> int:
        return self._remaining % 60

    def display(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}"

    def start(self) -> None:
        if self._state == RUNNING or self._remaining == 0:
            return
        self._state = RUNNING

    def pause(self) -> None:
        if self._state == RUNNING:
            self._state = PAUSED

    def reset(self, initial_seconds: int | None = None) -> None:
        """Back to idle with the full duration; optionally change the duration first."""
        if initial_seconds is not None:
            if initial_seconds < 0:
                raise ValueError("initial_seconds must be >= 0")
            self._initial = initial_seconds
        self._remaining = self._initial
        self._state = IDLE

    def tick(self, seconds: int = 1) -> int:
        if self._state != RUNNING or seconds <= 0:
            return self._remaining
        self._remaining = max(0, self._remaining - seconds)
        if self._remaining == 0:
            self._state = PAUSED
        return self._remaining
