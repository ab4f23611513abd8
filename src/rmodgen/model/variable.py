from dataclasses import dataclass
from enum import Enum
from typing import Self

from rmodgen.linebuffer import LineBuffer, collapse, indent_string
from rmodgen.model.core import RustGen, Visibility


class VariableKind(Enum):
    LET = "let"
    CONST = "const"
    STATIC = "static"


@dataclass
class Variable(RustGen):
    """A `let`, `const` or `static` binding, rendered as a single line."""

    name: str
    kind: VariableKind = VariableKind.LET
    value: str = ""
    type: str = ""
    is_mutable: bool = False
    visibility: Visibility = Visibility.PRIVATE

    @classmethod
    def new_let(cls, name: str) -> "Variable":
        return cls(name, VariableKind.LET)

    @classmethod
    def new_const(cls, name: str) -> "Variable":
        return cls(name, VariableKind.CONST)

    @classmethod
    def new_static(cls, name: str) -> "Variable":
        return cls(name, VariableKind.STATIC)

    def set_value(self, value: str) -> None:
        self.value = value

    def set_type(self, type_: str) -> None:
        self.type = type_

    def set_mut(self, mutable: bool) -> None:
        self.is_mutable = mutable

    def set_visibility(self, visibility: Visibility) -> None:
        self.visibility = visibility

    def with_value(self, value: str) -> Self:
        self.set_value(value)
        return self

    def with_type(self, type_: str) -> Self:
        self.set_type(type_)
        return self

    def with_mut(self, mutable: bool = True) -> Self:
        self.set_mut(mutable)
        return self

    def with_visibility(self, visibility: Visibility) -> Self:
        self.set_visibility(visibility)
        return self

    def declaration(self) -> str:
        """Generate the binding ("[vis ]let [mut ]name[: type][ = value];")."""
        mut = "mut " if self.is_mutable else ""
        annot_type = f": {self.type}" if self.type else ""
        value = f" = {self.value}" if self.value else ""
        return f"{self.visibility.prefix()}{self.kind.value} {mut}{self.name}{annot_type}{value};"

    def generate(self, indent_level: int = 0) -> LineBuffer:
        return [f"{indent_string(indent_level)}{self.declaration()}"]

    def render(self, indent_level: int = 0) -> str:
        return collapse(self.generate(indent_level))
