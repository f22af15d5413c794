# ferrules

`ferrules` walks you through a course of small exercises. Each exercise is a
source file with a mistake in it: a compile error, a failing test or a lint
warning. You fix it. `ferrules` compiles it and runs it. Once you remove the
`I AM NOT DONE` marker from the file, it moves you on to the next one.

## Installing

```
pip install ferrules
```

The exercises are built with the system compiler. `rustc` must be on your
`PATH`, and `cargo` as well for the lint (clippy) exercises. `ferrules` checks
for `rustc` at start-up and exits with status 1 if it cannot run
`rustc --version`.

## Getting started

Run the command from the directory that holds `info.toml`. That file lists the
exercises in their recommended order. Each entry has a `name`, a `path`, a
`mode` (`compile`, `test` or `clippy`) and a `hint`.

```
ferrules
```

With no subcommand it prints a short introduction. The usual way to work is
watch mode:

```
ferrules watch
```

Watch mode verifies the exercises in order and stops at the first one that is
not finished. It checks again every time a `.rs` file under `exercises/` is
created or saved. While it runs you can type:

- `hint`: show the hint for the exercise that last failed
- `clear`: clear the screen
- `quit`: leave watch mode
- `!<cmd>`: run a command, such as `!rustc --explain E0381`
- `help`: list these commands

Pass `--success-hints` to `ferrules watch` to see an exercise's hint even after
it passes.

## Commands

```
ferrules verify          # check every exercise in order
ferrules run <name>      # compile and run (or test) one exercise
ferrules run next        # run the first exercise that is not done
ferrules hint <name>     # print the hint of one exercise
ferrules reset <name>    # stash your changes to one exercise with git
ferrules list            # show every exercise and whether it is done
ferrules lsp             # write rust-project.json for editor support
ferrules --version       # print the version
```

The name `next` works for `run`, `hint` and `reset`. If no exercise matches the
name, `ferrules` prints a message and exits with status 1.

`ferrules list` takes these options:

- `--paths` / `-p`: print only the paths
- `--names` / `-n`: print only the names
- `--filter` / `-f`: comma separated patterns matched against names and paths
- `--solved` / `-s`: only exercises that are done
- `--unsolved` / `-u`: only exercises that are still pending

The listing ends with a progress line that gives the share of exercises done.

The global `--nocapture` flag shows the output of test exercises.

`ferrules lsp` uses `RUST_SRC_PATH` as the standard library source path when
that variable is set. Otherwise it asks `rustc --print sysroot`.

Setting the `NO_EMOJI` environment variable replaces the emoji in messages with
plain characters.

## Using it from Python

The command line is a thin layer over these modules:

- `ferrules.exercise`:
  - `load_exercises(path)` reads `info.toml`.
  - `Exercise.compile()` returns a `CompiledExercise`. It is a context manager
    that removes the temporary binary on close.
  - `Exercise.state()` returns the `ContextLine`s around a pending marker.
  - Failures raise `ExerciseFailed`.
- `ferrules.verify`: `verify(exercises, progress, verbose, success_hints)`
  raises `VerifyError` at the first exercise that fails or is still pending.
- `ferrules.run`: `run(exercise, verbose)` and `reset(exercise)`.
- `ferrules.project`: `RustAnalyzerProject` builds `rust-project.json`.
- `ferrules.watch`: `watch(exercises, verbose, success_hints)` and the
  `WatchShell` command reader.
- `ferrules.cli`: `main(argv)`, `find_exercise`, `list_exercises` and
  `rustc_exists`.

## Worked solutions

The `ferrules.drills` package holds worked solutions to many of the exercises,
written as ordinary Python functions and classes:

- `quizzes`: `calculate_price_of_apples`, `transformer`, `ReportCard`
- `branching`: `bigger`, `foo_if_fizz`, `sale_price`, `is_even`,
  `maybe_icecream`
- `errors`: `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`,
  `parse_pos_nonzero`
- `text`: `trim_me`, `compose_me`, `replace_me`, `vec_loop`, `vec_map`
- `structs`: `ColorClassicStruct`, `Order`, `Package`, `Wrapper`, `Rectangle`
- `baskets`: `make_basket`, `fill_basket`, `build_scores_table`
- `messages`: `State.process` with `ChangeColor`, `Echo`, `Move` and `Quit`
- `iteration`: `capitalize_first`, `divide`, `factorial`, `count_iterator`
- `pointers`: `Cons`/`Nil` lists, `Cow` with `abs_all`, `offset_sums`
- `traits`: `append_bar`, `Licensed`, `compare_license_types`

## What it does not do

`ferrules` does not come with the exercise files or an `info.toml`. You run it
inside a course directory that already has them. The drills cover only the
topics listed above. There are no worked solutions for the type conversion
exercises.