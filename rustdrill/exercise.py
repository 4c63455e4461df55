"""Exercise metadata, completion state, compilation and execution."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rustdrill.ui import emoji_enabled

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
I_AM_DONE_PATTERN = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"


def temp_file_path() -> str:
    """Return a temporary binary path unique to this process and thread."""
    thread_id = "".join(
        char for char in f"ThreadId{threading.get_ident()}" if char.isalnum()
    )
    return f"./temp_{os.getpid()}_{thread_id}"


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class ExerciseError(Exception):
    """A tool run for an exercise finished unsuccessfully."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"{exercise}: {output.stderr or output.stdout}")
        self.exercise = exercise
        self.output = output


class CompileError(ExerciseError):
    """Compiling or linting the exercise failed."""


class RunError(ExerciseError):
    """The compiled exercise exited with a failure."""


def _clean() -> None:
    with contextlib.suppress(OSError):
        os.remove(temp_file_path())


def _output(proc: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=proc.stdout.decode("utf-8", errors="replace"),
        stderr=proc.stderr.decode("utf-8", errors="replace"),
    )


def _capture(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _source_lines(source: str) -> list[str]:
    parts = source.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class CompiledExercise:
    """A successfully built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary, raising RunError if it fails."""
        return self.exercise._run()

    def close(self) -> None:
        _clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def _rustc_command(self, *, test: bool = False) -> list[str]:
        args = ["rustc"]
        if test:
            args.append("--test")
        args += [str(self.path), "-o", temp_file_path()]
        args += [*RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS, *RUSTC_NO_DEBUG_ARGS]
        return args

    def _clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            message = (
                "Failed to write 📎 Clippy 📎 Cargo.toml file."
                if emoji_enabled()
                else "Failed to write Clippy Cargo.toml file."
            )
            raise RuntimeError(message) from err
        # Build a binary too, so clippy exercises can be run afterwards.
        _capture(self._rustc_command())
        # A clean is needed for clippy to report every lint.
        _capture(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _capture(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def compile(self) -> CompiledExercise:
        """Build the exercise, raising CompileError on failure."""
        match self.mode:
            case Mode.COMPILE:
                proc = _capture(self._rustc_command())
            case Mode.TEST:
                proc = _capture(self._rustc_command(test=True))
            case Mode.CLIPPY:
                proc = self._clippy()
        if proc.returncode == 0:
            return CompiledExercise(self)
        _clean()
        raise CompileError(self, _output(proc))

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        proc = _capture([temp_file_path(), arg])
        output = _output(proc)
        if proc.returncode != 0:
            raise RunError(self, output)
        return output

    def pending_context(self) -> list[ContextLine] | None:
        """Lines around the pending marker, or None when the exercise is done."""
        with self.path.open(encoding="utf-8", newline="") as handle:
            source = handle.read()
        if not I_AM_DONE_PATTERN.search(source):
            return None
        lines = _source_lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_PATTERN.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        low = max(matched - CONTEXT, 0)
        return [
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines[low : matched + CONTEXT + 1], start=low)
        ]

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.pending_context() is None

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as err:
        raise ValueError(f"missing field {err.args[0]!r} in {path}") from err