from dataclasses import dataclass, field
from typing import Self

from rmodgen.linebuffer import LineBuffer, collapse, concat, expand, indent
from rmodgen.model.core import Declared, Field, GenericParams, RustGen, Visibility, cfg_lines
from rmodgen.model.structure import declaration_line


class EnumVariant(RustGen):
    """One case of an enum: struct-shaped, positional (value) or empty.

    Variants render without a trailing newline.
    """

    name: str

    @staticmethod
    def new_struct(name: str, fields: list[Field]) -> "StructVariant":
        return StructVariant(name, fields)

    @staticmethod
    def new_value(name: str, types: list[str]) -> "ValueVariant":
        return ValueVariant(name, types)

    @staticmethod
    def new_empty(name: str) -> "EmptyVariant":
        return EmptyVariant(name)

    @staticmethod
    def build(name: str) -> "EnumVariantBuilder":
        return EnumVariantBuilder(name)

    def render(self, indent_level: int = 0) -> str:
        return collapse(self.generate(indent_level))


@dataclass
class StructVariant(EnumVariant):
    """`Name { field: type, ... },` (field visibility is never rendered)."""

    name: str
    fields: list[Field] = field(default_factory=list)

    def generate(self, indent_level: int = 0) -> LineBuffer:
        buf = [
            f"{self.name} {{",
            *indent([f"{f.declaration(with_visibility=False)}," for f in self.fields]),
            "},",
        ]
        return indent(buf, indent_level)


@dataclass
class ValueVariant(EnumVariant):
    """`Name(type1, type2),`"""

    name: str
    types: list[str] = field(default_factory=list)

    def generate(self, indent_level: int = 0) -> LineBuffer:
        return indent([f"{self.name}({', '.join(self.types)}),"], indent_level)


@dataclass
class EmptyVariant(EnumVariant):
    """`Name,`"""

    name: str

    def generate(self, indent_level: int = 0) -> LineBuffer:
        return indent([f"{self.name},"], indent_level)


@dataclass
class EnumVariantBuilder:
    """Infers the variant shape from what was added.

    Any named field makes a struct variant, positional values alone make a value
    variant and nothing at all makes an empty variant. Mixing `with_field` and
    `with_value` on the same builder is a caller error: the positional names
    ("0", "1", ...) end up as field names of a struct variant.
    """

    name: str
    struct_variant: bool = False
    fields: list[tuple[str, str]] = field(default_factory=list)

    def push_field(self, name: str, type_: str) -> None:
        self.struct_variant = True
        self.fields.append((name, type_))

    def push_value(self, type_: str) -> None:
        self.fields.append((str(len(self.fields)), type_))

    def with_field(self, name: str, type_: str) -> Self:
        self.push_field(name, type_)
        return self

    def with_value(self, type_: str) -> Self:
        self.push_value(type_)
        return self

    def build(self) -> EnumVariant:
        if self.struct_variant:
            return StructVariant(self.name, [Field.private(name, type_) for name, type_ in self.fields])
        if not self.fields:
            return EmptyVariant(self.name)
        return ValueVariant(self.name, [type_ for _, type_ in self.fields])


@dataclass
class Enum(GenericParams, Declared, RustGen):
    """Rust enum."""

    name: str
    variants: list[EnumVariant] = field(default_factory=list)
    visibility: Visibility = Visibility.PRIVATE
    lifetimes: list[str] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)
    extra: str = ""
    cfg: str = ""

    def push_variant(self, variant: EnumVariant) -> None:
        self.variants.append(variant)

    def with_variant(self, variant: EnumVariant) -> Self:
        self.push_variant(variant)
        return self

    def generate(self, indent_level: int = 0) -> LineBuffer:
        buf = [
            *cfg_lines(self.cfg),
            declaration_line("enum", self.name, self.visibility, self.generics(), self.extra),
            *concat([expand(variant.render(1)) for variant in self.variants]),
            "}",
        ]
        return indent(buf, indent_level)
