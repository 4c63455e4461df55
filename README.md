# rustdrill

`rustdrill` is a Python library for working with a set of small Rust
exercises. It reads the exercise list, decides whether each exercise is still
marked as pending, compiles it with `rustc` (or lints it with `cargo clippy`),
runs the result, and can write a `rust-project.json` so that rust-analyzer
understands the exercise files. It also holds worked Python examples of the
ideas the exercises teach.

## Installing

```
pip install .
```

Compiling and running exercises needs a Rust toolchain: `rustc` on your
`PATH`, and `cargo` for Clippy exercises.

## What the package does not do

There is no command-line program. The package has no `watch`, `verify`, `run`,
`hint`, `reset` or `list` commands, no interactive watch mode, and no progress
display; those have to be built on top of the library functions described
below.

## The exercise list

Exercises are described in an `info.toml` file:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

`mode` is one of `compile`, `test` or `clippy` (the members of
`rustdrill.exercise.Mode`).

```python
from rustdrill.exercise import load_exercises

exercises = load_exercises("info.toml")   # list[Exercise]
```

A missing field raises `ValueError`; an unknown mode raises `ValueError` too.

## Exercises

`rustdrill.exercise.Exercise` has `name`, `path`, `mode` and `hint`;
`str(exercise)` is its path.

- `exercise.pending_context()` returns `None` when the file no longer contains
  an `// I AM NOT DONE` line, and otherwise a list of `ContextLine` objects
  (`line`, `number`, `important`) covering the two lines before and after the
  marker, with the marker line flagged as important.
- `exercise.looks_done()` is `True` when there is no marker.
- `exercise.compile()` builds the exercise and returns a `CompiledExercise`,
  or raises `CompileError` carrying the captured `ExerciseOutput`
  (`stdout`, `stderr`).
  - `compile` mode runs `rustc` on the file.
  - `test` mode runs `rustc --test`.
  - `clippy` mode writes `./exercises/22_clippy/Cargo.toml`, builds the file
    with `rustc`, runs `cargo clean` and then
    `cargo clippy -- -D warnings -D clippy::float_cmp`.
- `CompiledExercise.run()` runs the built binary (with `--show-output` for
  test exercises) and returns its `ExerciseOutput`, or raises `RunError`.
  Use it as a context manager, or call `close()`, to remove the binary.

```python
from rustdrill.exercise import CompileError, RunError

for exercise in exercises:
    try:
        with exercise.compile() as compiled:
            output = compiled.run()
    except (CompileError, RunError) as err:
        print(err.output.stderr or err.output.stdout)
        break
```

Binaries are written to the current directory under the name returned by
`temp_file_path()`, which is unique per process and thread.

## Status messages

`rustdrill.ui.warn(message)` and `rustdrill.ui.success(message)` print a red
or green line with a leading symbol. Emoji are used unless the `NO_EMOJI`
environment variable is set (`emoji_enabled()` tells which).

## rust-analyzer project file

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()         # RUST_SRC_PATH, or `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("./rust-project.json")
```

Each `.rs` file becomes a `Crate` with edition 2021 and the `test` cfg set.
`add_path(path)` adds a single file; `to_json()` returns the compact JSON text.

## Worked examples

The `rustdrill.lessons` package holds plain Python versions of what the
exercises teach:

- `basics` – apple prices, text commands (`Uppercase`, `Trim`, `Append`),
  `ReportCard`, branching helpers, list doubling, string helpers,
  `maybe_icecream`;
- `structs` – `Order`, `Package`, and a `State` driven by `ChangeColor`,
  `Echo`, `Move` and `Quit` messages;
- `containers` – `Fruit` baskets, `build_scores_table`, `Wrapper`,
  `append_bar` and a `Cons` list;
- `iterators` – capitalisation, exact `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `factorial`, and counting `Progress` values;
- `errors` – `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`
  and `parse_pos_nonzero`;
- `shapes` – a validated `Rectangle` and `abs_all`.

```python
from rustdrill.lessons.basics import calculate_price_of_apples
from rustdrill.lessons.iterators import divide

calculate_price_of_apples(41)   # 41
divide(81, 9)                   # 9
```