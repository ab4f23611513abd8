from dataclasses import dataclass, field
from typing import Self

from rmodgen.linebuffer import LineBuffer, expand, indent
from rmodgen.model.core import GenericParams, RustGen, Visibility


@dataclass
class Method(GenericParams, RustGen):
    """Rust function or method.

    The body is pre-formatted statement text; it is only split into lines and
    indented one level deeper than the signature.
    """

    name: str
    fn_type: str = ""
    """Qualifier placed before `fn` (e.g. "unsafe", "const", "async")."""
    visibility: Visibility = Visibility.PRIVATE
    arguments: list[str] = field(default_factory=list)
    return_type: str = ""
    body: str = ""
    has_body: bool = True
    """When false, only the signature is emitted, terminated by `;` (trait method declarations)."""
    lifetimes: list[str] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)

    def set_fn_type(self, fn_type: str) -> None:
        self.fn_type = fn_type

    def set_visibility(self, visibility: Visibility) -> None:
        self.visibility = visibility

    def push_argument(self, argument: str) -> None:
        self.arguments.append(argument)

    def set_return_type(self, return_type: str) -> None:
        self.return_type = return_type

    def set_body(self, body: str) -> None:
        self.body = body

    def set_has_body(self, has_body: bool) -> None:
        self.has_body = has_body

    def with_fn_type(self, fn_type: str) -> Self:
        self.set_fn_type(fn_type)
        return self

    def with_visibility(self, visibility: Visibility) -> Self:
        self.set_visibility(visibility)
        return self

    def with_argument(self, argument: str) -> Self:
        self.push_argument(argument)
        return self

    def with_return_type(self, return_type: str) -> Self:
        self.set_return_type(return_type)
        return self

    def with_body(self, body: str) -> Self:
        self.set_body(body)
        return self

    def with_no_body(self) -> Self:
        self.set_has_body(False)
        return self

    def signature(self) -> str:
        """Generate the signature ("[vis ][qualifier ]fn name<..>(args)[ -> ret]")."""
        qualifier = f"{self.fn_type} " if self.fn_type else ""
        ret = f" -> {self.return_type}" if self.return_type else ""
        return (
            f"{self.visibility.prefix()}{qualifier}fn {self.name}{self.generics()}"
            f"({', '.join(self.arguments)}){ret}"
        )

    def generate(self, indent_level: int = 0) -> LineBuffer:
        if not self.has_body:
            return indent([f"{self.signature()};"], indent_level)
        buf = [
            f"{self.signature()} {{",
            *indent(expand(self.body)),
            "}",
        ]
        return indent(buf, indent_level)
