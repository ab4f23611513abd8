"""Test whole-file assembly."""

import pathlib

from rmodgen.model import Field, Module, RustFile, Struct


def test_single_file() -> None:
    my_file = (
        RustFile()
        .with_import("use std::fmt")
        .with_component(
            Struct("Logger").with_template("T").with_extra("where T: Write").with_field(Field.private("sink", "T"))
        )
        .with_component(Module("tests").with_cfg("#[cfg(test)]"))
    )
    expected = "use std::fmt;\n\nstruct Logger<T> where T: Write {\n    sink: T,\n}\n\n#[cfg(test)]\nmod tests {\n}\n\n"
    assert my_file.render() == expected


def test_empty_file() -> None:
    assert RustFile().render() == ""


def test_all_sections() -> None:
    f = (
        RustFile()
        .with_file_docstring("Documentation for this file!\n\nWith Multiple line support!")
        .with_imports(["use std::fs::File", "use std::io::Write"])
        .with_top_string("#![allow(dead_code)]")
        .with_component(Struct("A"))
        .with_bottom_string("// end")
    )
    assert f.render() == (
        "//! Documentation for this file!\n"
        "//!\n"
        "//! With Multiple line support!\n"
        "\n"
        "use std::fs::File;\n"
        "use std::io::Write;\n"
        "\n"
        "#![allow(dead_code)]\n"
        "\n"
        "struct A {\n"
        "}\n"
        "\n"
        "// end\n"
        "\n"
    )


def test_empty_sections_are_omitted() -> None:
    f = RustFile().with_top_string("// top").with_bottom_string("// bottom")
    assert f.render() == "// top\n\n// bottom\n\n"


def test_with_components_replaces() -> None:
    f = RustFile().with_component(Struct("Old")).with_components([Struct("New")])
    assert f.render() == "struct New {\n}\n\n"


def test_write(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "lib.rs"
    RustFile().with_component(Struct("A")).write(path)
    assert path.read_text(encoding="utf-8") == "struct A {\n}\n\n"


def test_top_and_bottom_setters() -> None:
    f = RustFile().with_top_string("// old top")
    f.set_top_string("// top")
    f.set_bottom_string("// bottom")
    assert f.render() == "// top\n\n// bottom\n\n"
    f.set_bottom_string("")
    assert f.render() == "// top\n\n"
