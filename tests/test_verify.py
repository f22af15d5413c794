from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from ferrules.exercise import (
    ContextLine,
    Exercise,
    ExerciseFailed,
    ExerciseOutput,
    Mode,
    State,
)
from ferrules.verify import VerifyError, prompt_for_completion, test, verify

PENDING_SOURCE = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED_SOURCE = "// fake_exercise\n\nfn main() {\n\n}\n"


class FakeCompiled:
    def __init__(self, exercise: FakeExercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        output = ExerciseOutput(self.exercise.stdout, "runtime stderr")
        if self.exercise.run_fails:
            raise ExerciseFailed(output)
        return output

    def close(self) -> None:
        self.exercise.closed = True

    def __enter__(self) -> FakeCompiled:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class FakeExercise:
    name: str
    mode: Mode
    hint: str = "look closer"
    pending: bool = False
    compile_error: str | None = None
    run_fails: bool = False
    stdout: str = "program output"
    compiled: int = 0
    closed: bool = False

    def __str__(self) -> str:
        return f"exercises/{self.name}.rs"

    def compile(self) -> FakeCompiled:
        self.compiled += 1
        if self.compile_error is not None:
            raise ExerciseFailed(ExerciseOutput("", self.compile_error))
        return FakeCompiled(self)

    def state(self) -> State:
        if not self.pending:
            return State()
        return State((ContextLine("// I AM NOT DONE", 1, True),))


def _real_exercise(tmp_path: Path, source: str, mode: Mode = Mode.COMPILE) -> Exercise:
    path = tmp_path / "pending_exercise.rs"
    path.write_text(source, encoding="utf-8")
    return Exercise(name="pending_exercise", path=path, mode=mode, hint="try harder")


def test_verify_all_done_checks_every_exercise(capsys):
    exercises = [
        FakeExercise("one", Mode.COMPILE),
        FakeExercise("two", Mode.TEST),
    ]
    verify(exercises, (0, 2))
    assert [e.compiled for e in exercises] == [1, 1]
    assert all(e.closed for e in exercises)
    assert "2/2" in capsys.readouterr().out


def test_verify_stops_at_first_pending():
    first = FakeExercise("first", Mode.COMPILE)
    pending = FakeExercise("second", Mode.COMPILE, pending=True)
    third = FakeExercise("third", Mode.COMPILE)
    with pytest.raises(VerifyError) as info:
        verify(iter([first, pending, third]), (0, 3))
    assert info.value.exercise is pending
    assert third.compiled == 0


def test_verify_reports_compile_failure(capsys):
    broken = FakeExercise("broken", Mode.COMPILE, compile_error="expected pattern")
    with pytest.raises(VerifyError) as info:
        verify([broken], (0, 1))
    assert info.value.exercise is broken
    out = capsys.readouterr().out
    assert "Compiling of exercises/broken.rs failed!" in out
    assert "expected pattern" in out


def test_verify_reports_run_errors(capsys):
    crashing = FakeExercise("crash", Mode.COMPILE, run_fails=True)
    with pytest.raises(VerifyError):
        verify([crashing], (0, 1))
    out = capsys.readouterr().out
    assert "Ran exercises/crash.rs with errors" in out
    assert "runtime stderr" in out
    assert crashing.closed


def test_verify_failing_tests_show_output(capsys):
    failing = FakeExercise("tests", Mode.TEST, run_fails=True, stdout="assertion failed")
    with pytest.raises(VerifyError):
        verify([failing], (0, 1))
    out = capsys.readouterr().out
    assert "Testing of exercises/tests.rs failed!" in out
    assert "assertion failed" in out


def test_verify_verbose_prints_test_output(capsys):
    exercise = FakeExercise("loud", Mode.TEST, stdout="THIS TEST TOO SHALL PASS")
    verify([exercise], (0, 1), verbose=True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out


def test_verify_clippy_pending_prompts(capsys):
    linted = FakeExercise("clippy1", Mode.CLIPPY, pending=True)
    with pytest.raises(VerifyError):
        verify([linted], (0, 1))
    out = capsys.readouterr().out
    assert "Successfully compiled exercises/clippy1.rs!" in out
    assert linted.closed


def test_test_does_not_prompt_for_pending(capsys):
    exercise = FakeExercise("pending_test", Mode.TEST, pending=True)
    test(exercise, False)
    out = capsys.readouterr().out
    assert "I AM NOT DONE" not in out
    assert exercise.compiled == 1


def test_test_raises_on_failure():
    exercise = FakeExercise("testNotPassed", Mode.TEST, run_fails=True)
    with pytest.raises(VerifyError) as info:
        test(exercise, False)
    assert info.value.exercise is exercise


def test_prompt_for_done_exercise_returns_true(tmp_path, capsys):
    exercise = _real_exercise(tmp_path, FINISHED_SOURCE)
    assert prompt_for_completion(exercise, None, False) is True
    assert capsys.readouterr().out == ""


def test_prompt_for_pending_exercise_shows_context(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    exercise = _real_exercise(tmp_path, PENDING_SOURCE)
    assert prompt_for_completion(exercise, "hello there", True) is False
    out = capsys.readouterr().out
    assert f"Successfully ran {exercise}!" in out
    assert "🎉 🎉  The code is compiling! 🎉 🎉" in out
    assert "Output:" in out and "hello there" in out
    assert "Hints:" in out and "try harder" in out
    assert " 3 |  // I AM NOT DONE" in out
    assert "fn main() {" in out


def test_prompt_without_emoji(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = _real_exercise(tmp_path, PENDING_SOURCE, Mode.TEST)
    assert prompt_for_completion(exercise, None, False) is False
    out = capsys.readouterr().out
    assert "~*~ The code is compiling, and the tests pass! ~*~" in out
    assert "Output:" not in out
    assert "Hints:" not in out