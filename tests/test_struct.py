"""Test struct rendering."""

from rmodgen.model import Field, Struct, Visibility


def _time() -> Struct:
    return (
        Struct("Time")
        .with_field(Field.private("seconds", "u64"))
        .with_field(Field.private("minutes", "u64"))
        .with_field(Field.private("hours", "u64"))
    )


def test_simple_struct() -> None:
    assert _time().render(0) == "struct Time {\n    seconds: u64,\n    minutes: u64,\n    hours: u64,\n}\n"


def test_struct_lifetimes() -> None:
    s = (
        Struct("Time")
        .with_lifetime("a")
        .with_lifetime("b")
        .with_field(Field.private("seconds", "&'a u64"))
        .with_field(Field.private("minutes", "u64"))
        .with_field(Field.private("hours", "u64"))
    )
    assert s.render(0) == "struct Time<'a, 'b> {\n    seconds: &'a u64,\n    minutes: u64,\n    hours: u64,\n}\n"


def test_struct_templates() -> None:
    s = (
        Struct("Time")
        .with_template("T")
        .with_template("P")
        .with_field(Field.private("seconds", "T"))
        .with_field(Field.private("minutes", "P"))
        .with_field(Field.private("hours", "u64"))
    )
    assert s.render(0) == "struct Time<T, P> {\n    seconds: T,\n    minutes: P,\n    hours: u64,\n}\n"


def test_struct_mixed_generics() -> None:
    s = _time().with_lifetime("a").with_lifetime("b").with_template("T")
    assert s.render().splitlines()[0] == "struct Time<'a, 'b, T> {"
    assert s.render(0) == "struct Time<'a, 'b, T> {\n    seconds: u64,\n    minutes: u64,\n    hours: u64,\n}\n"


def test_struct_visibility_and_field_visibility() -> None:
    s = (
        Struct("Point")
        .with_visibility(Visibility.PUBLIC)
        .with_field(Field("x", "f64", Visibility.PUBLIC))
        .with_field(Field("y", "f64", Visibility.CRATE_VISIBLE))
    )
    assert s.render() == "pub struct Point {\n    pub x: f64,\n    pub(crate) y: f64,\n}\n"


def test_struct_extra_and_cfg() -> None:
    s = (
        Struct("Logger")
        .with_template("T")
        .with_extra("where T: Write")
        .with_cfg("#[derive(Debug)]")
        .with_field(Field.private("sink", "T"))
    )
    assert s.render() == "#[derive(Debug)]\nstruct Logger<T> where T: Write {\n    sink: T,\n}\n"


def test_empty_struct_has_no_stray_punctuation() -> None:
    assert Struct("Unit").render() == "struct Unit {\n}\n"


def test_struct_indent_levels() -> None:
    s = _time().with_cfg("#[derive(Clone)]")
    lines = s.render(2).splitlines()
    assert lines[0] == "        #[derive(Clone)]"
    assert lines[1] == "        struct Time {"
    assert lines[2] == "            seconds: u64,"
    assert lines[-1] == "        }"


def test_struct_setters_last_write_wins() -> None:
    s = Struct("Time")
    s.set_visibility(Visibility.PUBLIC)
    s.set_visibility(Visibility.CRATE_VISIBLE)
    s.set_extra("where A: B")
    s.set_extra("")
    s.push_field(Field.private("a", "u8"))
    s.push_template("T")
    s.push_lifetime("a")
    assert s.render() == "pub(crate) struct Time<'a, T> {\n    a: u8,\n}\n"


def test_struct_render_is_idempotent() -> None:
    s = _time()
    assert s.render(1) == s.render(1)
    assert str(s) == s.render(0)


def test_multi_line_cfg_is_indented() -> None:
    s = Struct("Raw").with_cfg("#[derive(Debug)]\n#[repr(C)]")
    assert s.render(1) == "    #[derive(Debug)]\n    #[repr(C)]\n    struct Raw {\n    }\n"
