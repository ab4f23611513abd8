from __future__ import annotations

import typing
from dataclasses import dataclass, field
from typing import Self

from rmodgen.linebuffer import LineBuffer, indent
from rmodgen.model.core import Declared, GenericParams, RustGen, Visibility, cfg_lines, render_children

if typing.TYPE_CHECKING:
    from rmodgen.model.component import Component


@dataclass
class Trait(GenericParams, Declared, RustGen):
    """Trait definition with optional supertrait bounds."""

    name: str
    visibility: Visibility = Visibility.PRIVATE
    bounds: list[str] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    lifetimes: list[str] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)
    cfg: str = ""
    extra: str = ""

    def push_bound(self, bound: str) -> None:
        self.bounds.append(bound)

    def push_component(self, component: Component) -> None:
        self.components.append(component)

    def with_bound(self, bound: str) -> Self:
        self.push_bound(bound)
        return self

    def with_component(self, component: Component) -> Self:
        self.push_component(component)
        return self

    def declaration(self) -> str:
        """Generate the opening line ("[vis ]trait Name<..>[: A + B][ extra] {")."""
        bounds = f": {' + '.join(self.bounds)}" if self.bounds else ""
        extra = f" {self.extra}" if self.extra else ""
        return f"{self.visibility.prefix()}trait {self.name}{self.generics()}{bounds}{extra} {{"

    def generate(self, indent_level: int = 0) -> LineBuffer:
        return [
            *indent([*cfg_lines(self.cfg), self.declaration()], indent_level),
            *render_children(self.components, indent_level, [""]),
            *indent(["}"], indent_level),
        ]
