"""Checking exercises in order and prompting the learner on pending ones."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from ferrules.exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from ferrules.ui import no_emoji, success, warn

_BAR_WIDTH = 60
_SEPARATOR = "=" * 20


class VerifyError(Exception):
    """An exercise failed to compile, run, test or is still marked pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


class _Spinner:
    """A transient spinner shown only when writing to a terminal."""

    def __init__(self, message: str) -> None:
        console = _console()
        self._status: Status | None = (
            console.status(Text(message)) if console.is_terminal else None
        )

    def __enter__(self) -> _Spinner:
        if self._status is not None:
            self._status.start()
        return self

    def update(self, message: str) -> None:
        if self._status is not None:
            self._status.update(Text(message))

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def __exit__(self, *exc) -> None:
        self.stop()


def _render_progress(done: int, total: int, percentage: float) -> None:
    if total and done < total:
        filled = _BAR_WIDTH * done // total
        complete, rest = "#" * filled, ">" + "-" * (_BAR_WIDTH - filled - 1)
    else:
        complete, rest = "#" * _BAR_WIDTH, ""
    _console().print(
        Text.assemble(
            "Progress: [",
            (complete, "green"),
            (rest, "red"),
            f"] {done}/{total} ({percentage:.1f} %)",
        )
    )


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise VerifyError at the first that fails."""
    done, total = progress
    percentage = done / total * 100 if total else 0.0
    _render_progress(done, total, percentage)
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                passed = _compile_and_test(exercise, True, verbose, success_hints)
            case Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise, success_hints)
            case Mode.CLIPPY:
                passed = _compile_only(exercise, success_hints)
        if not passed:
            raise VerifyError(exercise)
        done += 1
        if total:
            percentage += 100 / total
        _render_progress(done, total, percentage)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    _compile_and_test(exercise, False, verbose, False)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        spinner.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise VerifyError(exercise) from err


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        _compile(exercise, spinner).close()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                spinner.stop()
                warn(f"Ran {exercise} with errors")
                print(err.output.stdout)
                print(err.output.stderr)
                raise VerifyError(exercise) from err
    return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                spinner.stop()
                warn(
                    f"Testing of {exercise} failed! Please try again. "
                    "Here's the output:"
                )
                print(err.output.stdout)
                raise VerifyError(exercise) from err
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.is_done():
        return True

    verb = {Mode.COMPILE: "ran", Mode.TEST: "tested", Mode.CLIPPY: "compiled"}
    success(f"Successfully {verb[exercise.mode]} {exercise}!")

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = _console()
    separator = Text(_SEPARATOR, style="bold")
    print()
    print(f"~*~ {message} ~*~" if plain else f"🎉 🎉  {message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(separator)
        print(prompt_output)
        console.print(separator)
        print()
    if success_hints:
        print("Hints:")
        console.print(separator)
        print(exercise.hint)
        console.print(separator)
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False