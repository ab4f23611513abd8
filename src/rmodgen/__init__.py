"""Structured Rust source code emitter."""

from rmodgen.model import (
    Component,
    EmptyVariant,
    Enum,
    EnumVariant,
    EnumVariantBuilder,
    Field,
    Implementation,
    Method,
    Module,
    RustFile,
    Struct,
    StructVariant,
    Text,
    Trait,
    ValueVariant,
    Variable,
    Visibility,
    render_component,
)

__version__ = "0.1.0"

__all__ = [
    "Component",
    "EmptyVariant",
    "Enum",
    "EnumVariant",
    "EnumVariantBuilder",
    "Field",
    "Implementation",
    "Method",
    "Module",
    "RustFile",
    "Struct",
    "StructVariant",
    "Text",
    "Trait",
    "ValueVariant",
    "Variable",
    "Visibility",
    "render_component",
]
