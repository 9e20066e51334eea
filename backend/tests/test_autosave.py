"""Debounced auto-save tests — timers are fakes fired by hand."""
import os
import threading
from datetime import datetime

from ielts_writer.application.autosave import AutoSaveChannel
from ielts_writer.persistence.repositories.file.file_draft_store import FileDraftStore
from ielts_writer.persistence.repositories.memory.memory_draft_store import MemoryDraftStore

KEY = "ielts-essay-content"


class FakeTimer:
    def __init__(self, delay, fn, args=()):
        self.delay = delay
        self.fn = fn
        self.args = args
        self.started = False
        self.cancelled = False
        self.daemon = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fn(*self.args)


class FakeTimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, delay, fn, args=()):
        timer = FakeTimer(delay, fn, args)
        self.timers.append(timer)
        return timer


def _channel(store=None, delay=2.0):
    factory = FakeTimerFactory()
    channel = AutoSaveChannel(
        store or MemoryDraftStore(),
        key=KEY,
        delay=delay,
        timer_factory=factory,
        clock=lambda: datetime(2024, 1, 1, 14, 5),
    )
    return channel, factory


def test_burst_of_edits_writes_only_the_latest_content():
    store = MemoryDraftStore()
    channel, factory = _channel(store)
    for text in ("I", "I think", "I think that"):
        channel.on_change(text)

    assert [t.cancelled for t in factory.timers] == [True, True, False]
    assert store.load(KEY) is None
    factory.timers[-1].fire()
    assert store.load(KEY) == "I think that"
    assert channel.has_pending is False


def test_timer_uses_configured_delay():
    channel, factory = _channel(delay=0.5)
    channel.on_change("text")
    assert factory.timers[0].delay == 0.5
    assert factory.timers[0].started


def test_superseded_timer_that_already_fired_does_not_write():
    store = MemoryDraftStore()
    channel, factory = _channel(store)
    channel.on_change("old")
    channel.on_change("new")
    factory.timers[0].fire()
    assert store.load(KEY) is None
    factory.timers[1].fire()
    assert store.load(KEY) == "new"


def test_blank_content_is_never_written():
    store = MemoryDraftStore()
    store.save(KEY, "previous draft")
    channel, factory = _channel(store)
    channel.on_change("   \n")
    factory.timers[0].fire()
    assert store.load(KEY) == "previous draft"
    assert channel.save_now("") is False
    assert channel.last_saved is None


def test_save_now_cancels_pending_and_writes_immediately():
    store = MemoryDraftStore()
    channel, factory = _channel(store)
    channel.on_change("draft")
    assert channel.save_now("draft plus") is True
    assert factory.timers[0].cancelled
    assert store.load(KEY) == "draft plus"
    assert channel.last_saved_label() == "at 14:05"


class SlowStore(MemoryDraftStore):
    """Blocks inside save() for one chosen content until released."""

    def __init__(self, slow_content):
        super().__init__()
        self.slow_content = slow_content
        self.entered = threading.Event()
        self.release = threading.Event()

    def save(self, key, content):
        if content == self.slow_content:
            self.entered.set()
            assert self.release.wait(timeout=5)
        super().save(key, content)


def test_debounced_write_in_flight_cannot_overwrite_a_newer_save():
    store = SlowStore("old")
    channel, factory = _channel(store)
    channel.on_change("old")

    firing = threading.Thread(target=factory.timers[0].fire)
    firing.start()
    assert store.entered.wait(timeout=5)

    saving = threading.Thread(target=channel.save_now, args=("new",))
    saving.start()
    # save_now must wait for the in-flight write instead of racing it
    saving.join(timeout=0.2)
    assert saving.is_alive()

    store.release.set()
    firing.join(timeout=5)
    saving.join(timeout=5)
    assert store.load(KEY) == "new"


def test_load_and_clear():
    store = MemoryDraftStore()
    channel, _ = _channel(store)
    assert channel.load() == ""
    channel.save_now("kept")
    assert channel.load() == "kept"
    channel.clear()
    assert channel.load() == ""
    assert channel.last_saved_label() == "never"


def test_close_cancels_pending():
    channel, factory = _channel()
    channel.on_change("text")
    channel.close()
    assert factory.timers[0].cancelled
    assert channel.has_pending is False


# ------------------------------------------------------------------
# File-backed draft slot
# ------------------------------------------------------------------
def test_file_draft_store_round_trip(tmp_path):
    store = FileDraftStore(str(tmp_path / "drafts"))
    assert store.load(KEY) is None
    store.save(KEY, "Line one\n\nLine two ✓")
    assert store.load(KEY) == "Line one\n\nLine two ✓"
    assert os.listdir(tmp_path / "drafts") == [f"{KEY}.txt"]
    store.clear(KEY)
    assert store.load(KEY) is None
    store.clear(KEY)


def test_file_draft_store_sanitises_keys(tmp_path):
    store = FileDraftStore(str(tmp_path))
    store.save("../escape/attempt", "x")
    assert os.listdir(tmp_path) == [".._escape_attempt.txt"]
