"""Editor session — composes the timer, text stats, auto-save, prompt catalog and scoring call."""
from __future__ import annotations
import logging
import os
import threading
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ielts_writer.application.autosave import AutoSaveChannel
from ielts_writer.domain.common.result import Result
from ielts_writer.domain.editor.text_stats import TextStats, compute_text_stats
from ielts_writer.domain.editor.timer import CountdownTimer
from ielts_writer.domain.scoring.rules import validate_submission
from ielts_writer.domain.scoring.schema import EvaluationResult
from ielts_writer.editor.api_client import ApiError, EssayApiClient

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "ielts-essay.txt"


def score_label(score: float) -> str:
    if score >= 8.5:
        return "Excellent"
    if score >= 7:
        return "Good"
    if score >= 5.5:
        return "Competent"
    if score >= 4:
        return "Limited"
    return "Needs Improvement"


class EditorSession:
    """
    Holds the draft and the selected prompt. All server calls go through the
    API client; failures come back as Result.fail so the terminal loop can
    print them and keep going.
    """

    def __init__(
        self,
        api: EssayApiClient,
        autosave: AutoSaveChannel,
        timer: Optional[CountdownTimer] = None,
        timer_lock: Optional[threading.Lock] = None,
    ):
        self.api = api
        self.autosave = autosave
        self.timer = timer or CountdownTimer()
        self.timer_lock = timer_lock or threading.Lock()
        self.prompts: List[Dict[str, Any]] = []
        self.selected_prompt: Optional[Dict[str, Any]] = None
        self.content = autosave.load()
        self.last_evaluation: Optional[EvaluationResult] = None

    # ------------------------------------------------------------------
    # Prompt catalog
    # ------------------------------------------------------------------
    def load_prompts(self, category: Optional[str] = None) -> Result[List[Dict[str, Any]]]:
        try:
            self.prompts = self.api.list_prompts(category)
        except ApiError as e:
            return Result.fail(e.message)
        if self.selected_prompt is None and self.prompts:
            self.selected_prompt = self.prompts[0]
        return Result.ok(self.prompts)

    def select_prompt(self, index: int) -> Result[Dict[str, Any]]:
        """Select by 1-based position in the last loaded list."""
        if not 1 <= index <= len(self.prompts):
            return Result.fail(f"Choose a prompt between 1 and {len(self.prompts)}")
        self.selected_prompt = self.prompts[index - 1]
        return Result.ok(self.selected_prompt)

    @property
    def prompt_text(self) -> str:
        return self.selected_prompt["content"] if self.selected_prompt else ""

    # ------------------------------------------------------------------
    # Draft editing
    # ------------------------------------------------------------------
    def set_content(self, text: str) -> None:
        self.content = text
        self.autosave.on_change(text)

    def append_line(self, line: str) -> None:
        self.set_content(f"{self.content}\n{line}" if self.content else line)

    def clear(self) -> None:
        self.content = ""
        self.autosave.clear()

    def stats(self) -> TextStats:
        return compute_text_stats(self.content)

    def save(self) -> bool:
        return self.autosave.save_now(self.content)

    def export(self, path: str = DEFAULT_EXPORT_FILENAME) -> Result[str]:
        if not self.content.strip():
            return Result.fail("Please write something before exporting.")
        path = os.path.abspath(path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.content)
        return Result.ok(path)

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------
    def start_timer(self) -> None:
        with self.timer_lock:
            self.timer.start()

    def pause_timer(self) -> None:
        with self.timer_lock:
            self.timer.pause()

    def reset_timer(self) -> None:
        with self.timer_lock:
            self.timer.reset()

    def time_left(self) -> str:
        with self.timer_lock:
            return self.timer.display()

    # ------------------------------------------------------------------
    # Scoring and storage
    # ------------------------------------------------------------------
    def check_ready(self) -> Result[int]:
        return validate_submission(self.content, self.prompt_text)

    def evaluate(self) -> Result[EvaluationResult]:
        ready = self.check_ready()
        if not ready.is_success:
            return Result.fail(ready.error, code=ready.code)
        try:
            data = self.api.validate_essay(self.content, self.prompt_text)
        except ApiError as e:
            return Result.fail(e.message)
        try:
            self.last_evaluation = EvaluationResult.model_validate(data)
        except ValidationError as e:
            logger.warning("Server returned a malformed evaluation: %s", e)
            return Result.fail("The server returned an evaluation this editor cannot read")
        return Result.ok(self.last_evaluation)

    def submit(self) -> Result[Dict[str, Any]]:
        """Store the draft as an essay record on the server."""
        if not self.content.strip():
            return Result.fail("Please write something before saving to the server.")
        with self.timer_lock:
            elapsed = self.timer.elapsed
        essay = {
            "title": self.selected_prompt["title"] if self.selected_prompt else "Untitled essay",
            "content": self.content,
            "prompt": self.prompt_text,
            "word_count": self.stats().word_count,
            "time_spent": elapsed,
        }
        try:
            return Result.ok(self.api.create_essay(essay))
        except ApiError as e:
            return Result.fail(e.message)

    def close(self) -> None:
        self.autosave.close()
        self.api.close()
