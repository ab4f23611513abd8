"""In-memory model of Rust constructs and their rendering."""

from rmodgen.model.component import COMPONENT_TYPES, Component, is_component, render_component
from rmodgen.model.core import Field, RustGen, Visibility, generic_clause, lifetime_list
from rmodgen.model.enumeration import (
    EmptyVariant,
    Enum,
    EnumVariant,
    EnumVariantBuilder,
    StructVariant,
    ValueVariant,
)
from rmodgen.model.file import RustFile
from rmodgen.model.implementation import Implementation
from rmodgen.model.method import Method
from rmodgen.model.module import Module
from rmodgen.model.structure import Struct
from rmodgen.model.text import Text
from rmodgen.model.trait import Trait
from rmodgen.model.variable import Variable, VariableKind

__all__ = [
    "COMPONENT_TYPES",
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
    "RustGen",
    "Struct",
    "StructVariant",
    "Text",
    "Trait",
    "ValueVariant",
    "Variable",
    "VariableKind",
    "Visibility",
    "generic_clause",
    "is_component",
    "lifetime_list",
    "render_component",
]
