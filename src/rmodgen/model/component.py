"""The closed set of constructs that can appear in a component list."""

from rmodgen.model.enumeration import EmptyVariant, Enum, EnumVariant, StructVariant, ValueVariant
from rmodgen.model.implementation import Implementation
from rmodgen.model.method import Method
from rmodgen.model.module import Module
from rmodgen.model.structure import Struct
from rmodgen.model.text import Text
from rmodgen.model.trait import Trait
from rmodgen.model.variable import Variable

Component = Module | Struct | Enum | EnumVariant | Method | Implementation | Trait | Variable | Text

COMPONENT_TYPES: tuple[type, ...] = (
    Module,
    Struct,
    Enum,
    StructVariant,
    ValueVariant,
    EmptyVariant,
    Method,
    Implementation,
    Trait,
    Variable,
    Text,
)


def is_component(obj: object) -> bool:
    """Check whether an object belongs to the construct union."""
    return isinstance(obj, COMPONENT_TYPES)


def render_component(component: Component, indent_level: int = 0) -> str:
    """Render any construct of the union at the given nesting depth."""
    if not is_component(component):
        raise TypeError(f"Not a renderable component: {type(component).__name__}")
    return component.render(indent_level)
