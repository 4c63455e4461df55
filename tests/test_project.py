import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from rustdrill.project import Crate, RustAnalyzerProject


def test_add_path_adds_rust_files():
    project = RustAnalyzerProject()
    project.add_path(Path("exercises/03_if/if1.rs"))
    assert project.crates == [Crate(root_module=str(Path("exercises/03_if/if1.rs")))]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_add_path_ignores_other_files():
    project = RustAnalyzerProject()
    project.add_path("README.md")
    project.add_path(".rs")
    project.add_path("exercises/03_if")
    assert project.crates == []


def test_exercises_to_json(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "deep").mkdir(parents=True)
    for name in ["b/y.rs", "a/x.rs", "a/deep/z.rs", "b/README.md"]:
        (tmp_path / name).write_text("", encoding="utf-8")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = [crate.root_module for crate in project.crates]
    assert roots == sorted(roots)
    assert set(roots) == {
        str(tmp_path / "a" / "x.rs"),
        str(tmp_path / "a" / "deep" / "z.rs"),
        str(tmp_path / "b" / "y.rs"),
    }


def test_exercises_to_json_missing_root(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "absent")
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust/library")
    project = RustAnalyzerProject()
    with patch("rustdrill.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/src/rust/library"
    assert run.call_count == 0


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    result = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with patch("rustdrill.project.subprocess.run", return_value=result) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    expected = Path("/opt/toolchain") / "lib" / "rustlib" / "src" / "rust" / "library"
    assert project.sysroot_src == str(expected)
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_to_json_empty_project_is_compact():
    assert RustAnalyzerProject().to_json() == '{"sysroot_src":"","crates":[]}'


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/lib/src")
    project.add_path("exercises/a.rs")
    data = json.loads(project.to_json())
    assert data["sysroot_src"] == "/lib/src"
    assert list(data["crates"][0]) == ["root_module", "edition", "deps", "cfg"]
    rebuilt = RustAnalyzerProject(
        sysroot_src=data["sysroot_src"],
        crates=[Crate(**crate) for crate in data["crates"]],
    )
    assert rebuilt == project


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/lib/src")
    project.add_path("exercises/b.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()