from dataclasses import dataclass
from typing import Self

from rmodgen.linebuffer import LineBuffer, expand, indent_string
from rmodgen.model.core import RustGen


@dataclass
class Text(RustGen):
    """Raw text passed through verbatim, for anything the model does not cover."""

    text: str = ""

    def set_text(self, text: str) -> None:
        self.text = text

    def with_text(self, text: str) -> Self:
        self.set_text(text)
        return self

    def generate(self, indent_level: int = 0) -> LineBuffer:
        return expand(self.render(indent_level))

    def render(self, indent_level: int = 0) -> str:
        """Only the first line is indented; no trailing newline is added."""
        return f"{indent_string(indent_level)}{self.text}"
