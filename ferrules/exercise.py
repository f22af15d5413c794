"""Exercises: loading the list, compiling, running and reading progress markers."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ferrules.ui import no_emoji

_RUSTC_COLOR_ARGS = ("--color", "always")
_RUSTC_EDITION_ARGS = ("--edition", "2021")
_I_AM_DONE = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
_CONTEXT = 2
_CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around a pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when it carries no context lines."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _execute(args: list[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True, check=False)
    except OSError as err:
        raise RuntimeError(failure) from err


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    last = parts.pop()
    lines = [part.removesuffix("\r") for part in parts]
    if last:
        lines.append(last)
    return lines


class CompiledExercise:
    """A successfully compiled exercise whose binary is removed on close."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the compiled binary; raise ExerciseFailed if it exits non-zero."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        proc = _execute([temp_file(), arg], "Failed to run 'run' command")
        output = ExerciseOutput(_decode(proc.stdout), _decode(proc.stderr))
        if proc.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        message = (
            "Failed to write Clippy Cargo.toml file."
            if no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            _CLIPPY_CARGO_TOML_PATH.write_text(manifest, encoding="utf-8")
        except OSError as err:
            raise RuntimeError(message) from err

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseFailed with the compiler output."""
        source = str(self.path)
        rustc_tail = [*_RUSTC_COLOR_ARGS, *_RUSTC_EDITION_ARGS]
        match self.mode:
            case Mode.COMPILE:
                command = ["rustc", source, "-o", temp_file(), *rustc_tail]
            case Mode.TEST:
                command = ["rustc", "--test", source, "-o", temp_file(), *rustc_tail]
            case Mode.CLIPPY:
                self._write_clippy_manifest()
                manifest = str(_CLIPPY_CARGO_TOML_PATH)
                _execute(
                    ["rustc", source, "-o", temp_file(), *rustc_tail],
                    "Failed to compile!",
                )
                _execute(
                    ["cargo", "clean", "--manifest-path", manifest, *_RUSTC_COLOR_ARGS],
                    "Failed to run 'cargo clean'",
                )
                command = [
                    "cargo", "clippy", "--manifest-path", manifest,
                    *_RUSTC_COLOR_ARGS,
                    "--", "-D", "warnings", "-D", "clippy::float_cmp",
                ]
        proc = _execute(command, "Failed to run 'compile' command.")
        if proc.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(ExerciseOutput(_decode(proc.stdout), _decode(proc.stderr)))

    def state(self) -> State:
        """Return the exercise state from its 'I AM NOT DONE' marker."""
        source = Path(self.path).read_text(encoding="utf-8")
        if not _I_AM_DONE.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if _I_AM_DONE.search(line)), None
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")
        first = max(0, matched - _CONTEXT)
        last = matched + _CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[first : last + 1], start=first)
            )
        )

    def looks_done(self) -> bool:
        """Whether the marker has been removed; a cheap stand-in for solving it."""
        return self.state().is_done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        entries = data["exercises"]
        return [
            Exercise(
                name=str(entry["name"]),
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=str(entry["hint"]),
            )
            for entry in entries
        ]
    except KeyError as err:
        raise ValueError(f"missing field {err.args[0]!r} in {path}") from err