from __future__ import annotations

import typing
from dataclasses import dataclass, field
from typing import Self

from rmodgen.linebuffer import LineBuffer, blank_after, indent
from rmodgen.model.core import RustGen, Visibility, cfg_lines, render_children

if typing.TYPE_CHECKING:
    from rmodgen.model.component import Component


@dataclass
class Module(RustGen):
    """Inline `mod` block with its own imports and child components."""

    name: str
    visibility: Visibility = Visibility.PRIVATE
    imports: list[str] = field(default_factory=list)
    """Raw import statements without the trailing semicolon (e.g. "use std::fmt")."""
    components: list[Component] = field(default_factory=list)
    cfg: str = ""

    def set_visibility(self, visibility: Visibility) -> None:
        self.visibility = visibility

    def set_cfg(self, cfg: str) -> None:
        self.cfg = cfg

    def push_import(self, import_: str) -> None:
        self.imports.append(import_)

    def push_component(self, component: Component) -> None:
        self.components.append(component)

    def set_components(self, components: list[Component]) -> None:
        self.components = list(components)

    def with_visibility(self, visibility: Visibility) -> Self:
        self.set_visibility(visibility)
        return self

    def with_cfg(self, cfg: str) -> Self:
        self.set_cfg(cfg)
        return self

    def with_import(self, import_: str) -> Self:
        self.push_import(import_)
        return self

    def with_component(self, component: Component) -> Self:
        self.push_component(component)
        return self

    def with_components(self, components: list[Component]) -> Self:
        self.set_components(components)
        return self

    def generate(self, indent_level: int = 0) -> LineBuffer:
        imports = indent([f"{import_};" for import_ in self.imports], indent_level + 1)
        return [
            *indent([*cfg_lines(self.cfg), f"{self.visibility.prefix()}mod {self.name} {{"], indent_level),
            *blank_after(imports),
            *render_children(self.components, indent_level),
            *indent(["}"], indent_level),
        ]
