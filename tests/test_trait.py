"""Test trait rendering."""

from rmodgen.model import Method, Text, Trait, Visibility


def test_empty_trait() -> None:
    assert Trait("Animal").render() == "trait Animal {\n}\n"


def test_trait_bounds_generics_extra() -> None:
    trait = (
        Trait("Container")
        .with_visibility(Visibility.PUBLIC)
        .with_lifetime("a")
        .with_template("T")
        .with_bound("Debug")
        .with_bound("Clone")
        .with_extra("where T: 'a")
    )
    assert trait.render() == "pub trait Container<'a, T>: Debug + Clone where T: 'a {\n}\n"


def test_trait_cfg() -> None:
    trait = Trait("Animal").with_cfg("#[cfg(feature = \"zoo\")]")
    assert trait.render(1) == "    #[cfg(feature = \"zoo\")]\n    trait Animal {\n    }\n"


def test_trait_children() -> None:
    trait = (
        Trait("Animal")
        .with_component(Text("fn name(&self) -> String;"))
        .with_component(Method("speak").with_argument("&self").with_body("println!(\"...\");"))
    )
    assert trait.render() == (
        "trait Animal {\n"
        "    fn name(&self) -> String;\n"
        "\n"
        "    fn speak(&self) {\n"
        "        println!(\"...\");\n"
        "    }\n"
        "}\n"
    )


def test_trait_method_declaration() -> None:
    trait = (
        Trait("Explosive")
        .with_visibility(Visibility.PUBLIC)
        .with_bound("std::fmt::Debug")
        .with_lifetime("a")
        .with_template("T")
        .with_component(Method("my_method").with_no_body())
    )
    assert trait.render(0) == "pub trait Explosive<'a, T>: std::fmt::Debug {\n    fn my_method();\n}\n"
