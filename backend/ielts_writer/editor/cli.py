"""Terminal writing editor.

Plain lines are appended to the draft; lines starting with ':' are commands.
Run `ielts-writer --help` for options and `:help` inside the editor.
"""
from __future__ import annotations
import argparse
import shutil
import sys
import textwrap
from typing import List, Optional

from ielts_writer.application.autosave import DEFAULT_DRAFT_KEY, AutoSaveChannel
from ielts_writer.core import config
from ielts_writer.core.logging_config import setup_logging
from ielts_writer.domain.catalog.seed import WRITING_TIPS
from ielts_writer.domain.editor.text_stats import TARGET_MIN_WORDS, TARGET_WORDS
from ielts_writer.domain.editor.timer import CountdownTimer
from ielts_writer.domain.scoring.schema import EvaluationResult
from ielts_writer.editor.api_client import EssayApiClient
from ielts_writer.editor.clock import CountdownClock
from ielts_writer.editor.session import DEFAULT_EXPORT_FILENAME, EditorSession, score_label
from ielts_writer.persistence.interfaces.draft_store import DraftStore
from ielts_writer.persistence.repositories.file.file_draft_store import FileDraftStore
from ielts_writer.persistence.repositories.memory.memory_draft_store import MemoryDraftStore

HELP_TEXT = """\
Commands:
  :prompts [category]  list writing prompts
  :prompt N            select prompt N
  :start / :pause      run or pause the countdown
  :reset               reset the countdown
  :time                show time left
  :stats               words, characters, paragraphs, target progress
  :tips                IELTS writing tips
  :show                print the current draft
  :save                save the draft now
  :export [path]       write the draft to a .txt file
  :score               send the essay for AI evaluation
  :submit              store the essay on the server
  :clear               discard the draft
  :help                this text
  :quit                save and exit
"""


# -------------------- SIMPLE TERMINAL UI --------------------
def term_width() -> int:
    try:
        return shutil.get_terminal_size().columns
    except Exception:
        return 80


def print_header(title: str) -> None:
    w = term_width()
    print("=" * w)
    print(title.center(w))
    print("=" * w)
    print()


def print_wrapped(text: str, indent: str = "") -> None:
    width = max(40, term_width() - len(indent))
    for paragraph in text.splitlines() or [""]:
        print(textwrap.fill(paragraph, width=width, initial_indent=indent, subsequent_indent=indent))


def print_evaluation(result: EvaluationResult) -> None:
    print_header(f"Band {result.overall_score:g} / 9 - {score_label(result.overall_score)}")
    print(f"  Task Response           {result.task_response:g}")
    print(f"  Coherence & Cohesion    {result.coherence_cohesion:g}")
    print(f"  Lexical Resource        {result.lexical_resource:g}")
    print(f"  Grammatical Range       {result.grammatical_range:g}")
    print(f"  Words counted           {result.word_count}\n")
    print("Feedback:")
    print_wrapped(result.feedback, indent="  ")
    if result.strengths:
        print("\nStrengths:")
        for item in result.strengths:
            print_wrapped(f"+ {item}", indent="  ")
    if result.improvements:
        print("\nAreas for improvement:")
        for item in result.improvements:
            print_wrapped(f"- {item}", indent="  ")
    print()


def print_prompts(session: EditorSession) -> None:
    for i, p in enumerate(session.prompts, start=1):
        marker = "*" if p is session.selected_prompt else " "
        print(f"{marker}{i}. [{p['category']}] {p['title']} ({p['difficulty']}, {p['time_limit']} min)")


# -------------------- COMMANDS --------------------
def handle_command(session: EditorSession, line: str) -> bool:
    """Run one ':' command. Returns False when the editor should exit."""
    parts = line[1:].strip().split(maxsplit=1)
    if not parts:
        return True
    cmd, arg = parts[0].lower(), (parts[1] if len(parts) > 1 else "")

    if cmd in ("quit", "q", "exit"):
        session.save()
        print("Draft saved. Goodbye")
        return False

    if cmd == "help":
        print(HELP_TEXT)
    elif cmd == "prompts":
        result = session.load_prompts(arg or None)
        if not result.is_success:
            print(f"â {result.error}")
        elif not result.value:
            print("No prompts in that category.")
        else:
            print_prompts(session)
    elif cmd == "prompt":
        try:
            index = int(arg)
        except ValueError:
            print("Usage: :prompt N")
            return True
        result = session.select_prompt(index)
        if result.is_success:
            print_header(result.value["title"])
            print_wrapped(result.value["content"])
        else:
            print(result.error)
    elif cmd == "start":
        session.start_timer()
        print(f"â±  Timer running ({session.time_left()} left)")
    elif cmd == "pause":
        session.pause_timer()
        print(f"â¸  Timer paused at {session.time_left()}")
    elif cmd == "reset":
        session.reset_timer()
        print(f"Timer reset to {session.time_left()}")
    elif cmd == "time":
        print(f"{session.time_left()} left")
    elif cmd == "stats":
        s = session.stats()
        print(f"Words: {s.word_count}  Characters: {s.char_count}  Paragraphs: {s.paragraph_count}")
        print(f"Target range: {TARGET_MIN_WORDS}-{TARGET_WORDS} words ({s.target_progress:.0f}%)")
        print(f"Last saved: {session.autosave.last_saved_label()}")
    elif cmd == "tips":
        print("IELTS Writing Tips:")
        for tip in WRITING_TIPS:
            print(f"  ✓ {tip}")
    elif cmd == "show":
        print_wrapped(session.content or "(empty draft)")
    elif cmd == "save":
        if session.save():
            print(f"Draft saved {session.autosave.last_saved_label()}")
        else:
            print("Nothing to save yet.")
    elif cmd == "export":
        result = session.export(arg or DEFAULT_EXPORT_FILENAME)
        print(f"Exported to {result.value}" if result.is_success else result.error)
    elif cmd == "score":
        print("Validating essay...")
        result = session.evaluate()
        if result.is_success:
            print_evaluation(result.value)
        else:
            print(f"â Validation failed: {result.error}")
    elif cmd == "submit":
        result = session.submit()
        if result.is_success:
            print(f"Essay #{result.value['id']} stored ({result.value['word_count']} words)")
        else:
            print(f"â {result.error}")
    elif cmd == "clear":
        confirm = input("Discard the whole draft? type YES to continue: ")
        if confirm.strip() == "YES":
            session.clear()
            print("Draft cleared.")
    else:
        print(f"Unknown command ':{cmd}'. Type :help")
    return True


# -------------------- MAIN --------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ielts-writer", description="IELTS Task 2 writing practice editor")
    parser.add_argument("--server", default=config.API_BASE_URL, help="essay API base URL")
    parser.add_argument("--minutes", type=int, default=None, help="countdown length in minutes")
    parser.add_argument("--draft-dir", default=config.DRAFT_DIR, help="where the draft is auto-saved")
    parser.add_argument("--no-draft", action="store_true", help="keep the draft in memory only")
    parser.add_argument("--category", default=None, help="only load prompts from this category")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("WARNING")

    store: DraftStore = MemoryDraftStore() if args.no_draft else FileDraftStore(args.draft_dir)
    autosave = AutoSaveChannel(store, key=DEFAULT_DRAFT_KEY, delay=config.AUTOSAVE_DELAY_SECONDS)
    seconds = args.minutes * 60 if args.minutes is not None else config.TIMER_SECONDS
    timer = CountdownTimer(seconds)
    clock = CountdownClock(timer, on_expired=lambda: print("\nâ° Time is up! The timer has stopped."))
    session = EditorSession(EssayApiClient(args.server), autosave, timer=timer, timer_lock=clock.lock)

    print_header("IELTS WRITING PRACTICE")
    result = session.load_prompts(args.category)
    if result.is_success and session.selected_prompt:
        print_prompts(session)
        print()
        print_wrapped(session.prompt_text)
    else:
        print(f"â ï¸  Prompts unavailable: {result.error or 'none found'}")
    if session.content:
        print(f"\nRestored draft ({session.stats().word_count} words).")
    print("\nType your essay. Commands start with ':' (:help for the list).\n")

    clock.start()
    try:
        while True:
            try:
                line = input()
            except EOFError:
                session.save()
                break
            if line.startswith(":"):
                if not handle_command(session, line):
                    break
            else:
                session.append_line(line)
    except KeyboardInterrupt:
        session.save()
        print("\nDraft saved.")
    finally:
        clock.stop()
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
