"""Command-line entry point: list, run, verify, watch, hint, reset and lsp."""

from __future__ import annotations

import argparse
import math
import subprocess
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from ferrules.exercise import Exercise, load_exercises
from ferrules.project import RustAnalyzerProject
from ferrules.run import reset, run
from ferrules.ui import no_emoji
from ferrules.verify import VerifyError, verify
from ferrules.watch import WatchStatus, watch

VERSION = "5.5.1"

WELCOME = "       welcome to...\n\n  f e r r u l e s"

DEFAULT_OUT = """Thanks for installing Ferrules!

Is this your first time? Don't worry, Ferrules was made for beginners! We are
going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how Ferrules operates:

1. The central concept behind Ferrules is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   Ferrules will be able to move on to the next exercise.
2. If you run Ferrules in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run Ferrules! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `ferrules hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue.
   We look at every issue, and sometimes, other learners do too so you can
   help each other out!
5. If you want to use `rust-analyzer` with exercises, which provides features like
   autocompletion, run the command `ferrules lsp`.

Got all that? Great! To get started, run `ferrules watch` in order to get the first
exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name; 'next' means the first one not yet done."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Iterable[Exercise],
    paths: bool = False,
    names: bool = False,
    filters: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with a progress line."""
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    patterns = [f for f in (filters or "").lower().split(",") if f.strip()]
    done = 0
    total = 0
    for exercise in exercises:
        total += 1
        fname = str(exercise.path)
        matches = any(p in exercise.name or p in fname for p in patterns)
        is_done = exercise.looks_done()
        if is_done:
            done += 1
        status = "Done" if is_done else "Pending"
        wanted = (
            (is_done and solved)
            or (not is_done and unsolved)
            or (not solved and not unsolved)
        )
        if wanted and (matches or filters is None):
            if paths:
                yield fname
            elif names:
                yield exercise.name
            else:
                yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    percentage = done / total * 100 if total else math.nan
    yield f"Progress: You completed {done} / {total} exercises ({percentage:.1f} %)."


def rustc_exists() -> bool:
    """Whether 'rustc --version' can be run successfully."""
    try:
        proc = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return proc.returncode == 0


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="ferrules",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    sub = parser.add_subparsers(dest="command", parser_class=_Parser)
    sub.add_parser("verify", help="Verifies all exercises according to the recommended order")
    watch_parser = sub.add_parser("watch", help="Reruns `verify` when files were edited")
    watch_parser.add_argument(
        "--success-hints", action="store_true", help="show hints on success"
    )
    for name, text in (
        ("run", "Runs/Tests a single exercise"),
        ("reset", 'Resets a single exercise using "git stash -- <filename>"'),
        ("hint", "Returns a hint for the given exercise"),
    ):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("name", help="the name of the exercise")
    list_parser = sub.add_parser("list", help="Lists the exercises available")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="display only exercises that have been solved"
    )
    sub.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def _print_listing(lines: Iterable[str]) -> int:
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError as err:
        raise RuntimeError(
            "Couldn't find toolchain path, do you have `rustc` installed?"
        ) from err
    project.exercises_to_json()
    if not project.crates:
        print("Failed find any exercises, make sure you're in the `ferrules` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print(
        "rust-analyzer will now parse exercises, restart your language server or editor"
    )
    return 0


def _watch(exercises: list[Exercise], verbose: bool, success_hints: bool) -> int:
    try:
        status = watch(exercises, verbose, success_hints)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your "
            "'inotify limit' has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `ferrules watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit code."""
    args = _build_parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the ferrules directory")
        print("Try `cd ferrules/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    match args.command:
        case None:
            print(f"{DEFAULT_OUT}\n")
            return 0
        case "list":
            return _print_listing(
                list_exercises(
                    exercises,
                    paths=args.paths,
                    names=args.names,
                    filters=args.filter,
                    unsolved=args.unsolved,
                    solved=args.solved,
                )
            )
        case "run" | "reset" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except ExerciseNotFound as err:
                print(err)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                if args.command == "run":
                    run(exercise, verbose)
                else:
                    reset(exercise)
            except (VerifyError, OSError):
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, (0, len(exercises)), verbose, False)
            except VerifyError:
                return 1
            return 0
        case "lsp":
            return _lsp()
        case "watch":
            return _watch(exercises, verbose, args.success_hints)
    return 1


if __name__ == "__main__":
    sys.exit(main())