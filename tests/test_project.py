from __future__ import annotations

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from ferrules.project import Crate, RustAnalyzerProject


def test_crate_defaults():
    crate = Crate("exercises/a.rs")
    assert (crate.edition, crate.deps, crate.cfg) == ("2021", [], ["test"])


def test_to_json_layout():
    project = RustAnalyzerProject(sysroot_src="/sys", crates=[Crate("exercises/a.rs")])
    assert json.loads(project.to_json()) == {
        "sysroot_src": "/sys",
        "crates": [
            {
                "root_module": "exercises/a.rs",
                "edition": "2021",
                "deps": [],
                "cfg": ["test"],
            }
        ],
    }
    assert project.to_json().startswith('{"sysroot_src":"/sys","crates":[')


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sys", crates=[Crate("x.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()


def test_exercises_to_json_collects_rust_files(tmp_path):
    (tmp_path / "intro").mkdir()
    (tmp_path / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (tmp_path / "quiz1.rs").write_text("fn main() {}\n")
    (tmp_path / "README.md").write_text("notes\n")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = {crate.root_module for crate in project.crates}
    assert roots == {str(tmp_path / "intro" / "intro1.rs"), str(tmp_path / "quiz1.rs")}
    assert all(crate.cfg == ["test"] for crate in project.crates)


def test_exercises_to_json_empty_directory(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust")
    project = RustAnalyzerProject()
    with patch("ferrules.project.subprocess.run") as runner:
        project.get_sysroot_src()
    assert project.sysroot_src == "/src/rust"
    runner.assert_not_called()


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=b"/opt/toolchain\n", stderr=b""
    )
    project = RustAnalyzerProject()
    with patch("ferrules.project.subprocess.run", return_value=completed) as runner:
        project.get_sysroot_src()
    runner.assert_called_once()
    assert runner.call_args.args[0] == ["rustc", "--print", "sysroot"]
    sysroot = Path(project.sysroot_src)
    assert sysroot.parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert sysroot.parents[4] == Path("/opt/toolchain")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out