from dataclasses import dataclass, field
from typing import Self

from rmodgen.linebuffer import LineBuffer, indent
from rmodgen.model.core import Declared, Field, GenericParams, RustGen, Visibility, cfg_lines


def declaration_line(keyword: str, name: str, visibility: Visibility, generics: str, extra: str) -> str:
    """Opening line shared by structs and enums ("[vis ]kw Name<..>[ extra] {")."""
    extra = f" {extra}" if extra else ""
    return f"{visibility.prefix()}{keyword} {name}{generics}{extra} {{"


@dataclass
class Struct(GenericParams, Declared, RustGen):
    """Rust struct with named fields."""

    name: str
    fields: list[Field] = field(default_factory=list)
    visibility: Visibility = Visibility.PRIVATE
    lifetimes: list[str] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)
    extra: str = ""
    """Raw text between the generic clause and the opening brace (e.g. a where-clause)."""
    cfg: str = ""
    """Raw line placed right above the declaration (e.g. an attribute)."""

    def push_field(self, field_: Field) -> None:
        self.fields.append(field_)

    def with_field(self, field_: Field) -> Self:
        self.push_field(field_)
        return self

    def generate(self, indent_level: int = 0) -> LineBuffer:
        buf = [
            *cfg_lines(self.cfg),
            declaration_line("struct", self.name, self.visibility, self.generics(), self.extra),
            *indent([f"{f.declaration()}," for f in self.fields]),
            "}",
        ]
        return indent(buf, indent_level)
