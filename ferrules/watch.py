"""Watch mode: re-verify exercises as files change, with a small command shell."""

from __future__ import annotations

import enum
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ferrules.exercise import Exercise
from ferrules.verify import VerifyError, verify

_DEBOUNCE_SECONDS = 1.0
_POLL_SECONDS = 1.0
_WATCH_DIR = "./exercises"

_HELP = (
    "Commands available to you in watch mode:\n"
    "  hint   - prints the current exercise's hint\n"
    "  clear  - clears the screen\n"
    "  quit   - quits watch mode\n"
    "  !<cmd> - executes a command, like `!rustc --explain E0381`\n"
    "  help   - displays this help message\n"
    "\n"
    "Watch mode automatically re-evaluates the current exercise\n"
    "when you edit a file's contents."
)


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class WatchShell:
    """Reads commands from a stream while watch mode runs."""

    def __init__(self, hint: str | None = None, stdin: TextIO | None = None) -> None:
        self.hint = hint
        self.should_quit = threading.Event()
        self._stdin = stdin

    def handle(self, line: str) -> None:
        """Carry out one command line."""
        command = line.strip()
        if command == "hint":
            hint = self.hint
            if hint is not None:
                print(hint)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            self.should_quit.set()
            print("Bye!")
        elif command == "help":
            print(_HELP)
        elif command.startswith("!"):
            cmd = command[1:]
            parts = cmd.split()
            if not parts:
                print("no command provided")
                return
            try:
                subprocess.run(parts, check=False)
            except OSError as err:
                print(f"failed to execute command `{cmd}`: {err}")
        else:
            print(f"unknown command: {command}")

    def start(self) -> threading.Thread:
        """Start reading commands on a background thread."""
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        thread = threading.Thread(target=self._read_loop, daemon=True)
        thread.start()
        return thread

    def _read_loop(self) -> None:
        stream = self._stdin if self._stdin is not None else sys.stdin
        while True:
            try:
                line = stream.readline()
            except (OSError, ValueError) as err:
                print(f"error reading command: {err}")
                return
            if not line:
                return
            self.handle(line)


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue[Path]) -> None:
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(str(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, tail: Path) -> bool:
    tail_parts = Path(tail).parts
    if len(tail_parts) > len(path.parts):
        return False
    return path.parts[len(path.parts) - len(tail_parts):] == tail_parts


def _next_changes(events: queue.Queue[Path]) -> list[Path]:
    """Wait briefly for a change, then gather the burst that follows it."""
    try:
        first = events.get(timeout=_POLL_SECONDS)
    except queue.Empty:
        return []
    changed = {first: None}
    while True:
        try:
            changed[events.get(timeout=_DEBOUNCE_SECONDS)] = None
        except queue.Empty:
            return list(changed)


def watch(
    exercises: Iterable[Exercise], verbose: bool = False, success_hints: bool = False
) -> WatchStatus:
    """Verify exercises, then re-verify whenever an exercise file changes."""
    exercises = list(exercises)
    total = len(exercises)
    events: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), _WATCH_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, total), verbose, success_hints)
            return WatchStatus.FINISHED
        except VerifyError as err:
            shell = WatchShell(err.exercise.hint)
        shell.start()
        while True:
            for changed in _next_changes(events):
                if changed.suffix != ".rs" or not changed.exists():
                    continue
                filepath = changed.resolve()
                current = next(
                    (e for e in exercises if _ends_with(filepath, e.path)), None
                )
                pending = ([current] if current is not None else []) + [
                    e
                    for e in exercises
                    if not e.looks_done() and not _ends_with(filepath, e.path)
                ]
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(pending, (num_done, total), verbose, success_hints)
                    return WatchStatus.FINISHED
                except VerifyError as err:
                    shell.hint = err.exercise.hint
            if shell.should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()