"""Test the command line entry point."""

import json
import pathlib

import pytest

from rmodgen.cli import find_descriptors, main


def _write_descriptor(path: pathlib.Path, descriptor: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(descriptor), encoding="utf-8")


def test_find_descriptors(tmp_path: pathlib.Path) -> None:
    _write_descriptor(tmp_path / "a.json", {})
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.toml").write_text("", encoding="utf-8")
    (tmp_path / "rmodgen.toml").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    assert find_descriptors(tmp_path) == [tmp_path / "a.json", tmp_path / "sub" / "b.toml"]


def test_main_writes_rust_files(tmp_path: pathlib.Path) -> None:
    src = tmp_path / "descriptors"
    out = tmp_path / "out"
    _write_descriptor(src / "nested" / "time.json", {"items": [{"kind": "struct", "name": "Time"}]})
    (src / "unit.toml").write_text('[[items]]\nkind = "enum"\nname = "Unit"\n', encoding="utf-8")

    assert main(["-i", str(src), "-o", str(out)]) == 0
    assert (out / "nested" / "time.rs").read_text(encoding="utf-8") == "struct Time {\n}\n\n"
    assert (out / "unit.rs").read_text(encoding="utf-8") == "enum Unit {\n}\n\n"


def test_main_prints_without_output(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_descriptor(tmp_path / "a.json", {"items": [{"kind": "let", "name": "x"}]})
    assert main(["-i", str(tmp_path)]) == 0
    assert "let x;" in capsys.readouterr().out


def test_main_skips_invalid(tmp_path: pathlib.Path) -> None:
    _write_descriptor(tmp_path / "bad.json", {"items": [{"kind": "nope"}]})
    _write_descriptor(tmp_path / "good.json", {"items": [{"kind": "struct", "name": "A"}]})
    out = tmp_path / "out"
    assert main(["-i", str(tmp_path), "-o", str(out)]) == 1
    assert (out / "good.rs").exists()
    assert not (out / "bad.rs").exists()


def test_main_debug_reraises(tmp_path: pathlib.Path) -> None:
    _write_descriptor(tmp_path / "bad.json", {"items": [{"kind": "nope"}]})
    with pytest.raises(ValueError):
        main(["-i", str(tmp_path), "-d"])
