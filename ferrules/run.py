"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from ferrules.exercise import Exercise, ExerciseFailed, Mode
from ferrules.ui import success, warn
from ferrules.verify import VerifyError, _Spinner, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run, or test, one exercise; raise VerifyError on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Start 'git stash' on the exercise file; OSError if git cannot start."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    failure: ExerciseFailed | None = None
    with _Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as err:
            spinner.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise VerifyError(exercise) from err
        spinner.update(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                failure = err

    if failure is not None:
        print(failure.output.stdout)
        print(failure.output.stderr)
        warn(f"Ran {exercise} with errors")
        raise VerifyError(exercise) from failure

    print(output.stdout)
    success(f"Successfully ran {exercise}")