from __future__ import annotations

import pathlib
import typing
from dataclasses import dataclass, field
from typing import Self

from rmodgen.linebuffer import LineBuffer, blank_after, collapse, comment, concat, expand

if typing.TYPE_CHECKING:
    from rmodgen.model.component import Component


@dataclass
class RustFile:
    """A whole source file.

    Sections are emitted in this order, each separated by one blank line and
    omitted when empty: doc comment, imports, top text, root components, bottom
    text. The document ends with a blank line.
    """

    components: list[Component] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    docstring: LineBuffer = field(default_factory=list)
    """Inner doc comment lines, already prefixed with `//!`."""
    top: str = ""
    bottom: str = ""

    def push_component(self, component: Component) -> None:
        self.components.append(component)

    def push_import(self, import_: str) -> None:
        self.imports.append(import_)

    def set_file_docstring(self, docstring: str) -> None:
        self.docstring = comment(expand(docstring), "//!")

    def set_top_string(self, text: str) -> None:
        self.top = text

    def set_bottom_string(self, text: str) -> None:
        self.bottom = text

    def with_component(self, component: Component) -> Self:
        self.push_component(component)
        return self

    def with_components(self, components: list[Component]) -> Self:
        self.components = list(components)
        return self

    def with_import(self, import_: str) -> Self:
        self.push_import(import_)
        return self

    def with_imports(self, imports: list[str]) -> Self:
        self.imports = list(imports)
        return self

    def with_file_docstring(self, docstring: str) -> Self:
        self.set_file_docstring(docstring)
        return self

    def with_top_string(self, text: str) -> Self:
        self.set_top_string(text)
        return self

    def with_bottom_string(self, text: str) -> Self:
        self.set_bottom_string(text)
        return self

    def generate(self) -> LineBuffer:
        sections = [
            self.docstring,
            [f"{import_};" for import_ in self.imports],
            expand(self.top),
            concat([expand(component.render(0)) for component in self.components], [""]),
            expand(self.bottom),
        ]
        return blank_after(concat([s for s in sections if s], [""]))

    def render(self) -> str:
        """Assemble the complete document."""
        lines = self.generate()
        if not lines:
            return ""
        return collapse(lines) + "\n"

    def write(self, path: pathlib.Path) -> None:
        """Write the rendered document to disk."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.render())

    def __str__(self) -> str:
        return self.render()
