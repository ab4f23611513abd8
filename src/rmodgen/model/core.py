"""Building blocks shared by every construct."""

from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Self

from rmodgen.linebuffer import LineBuffer, collapse, concat, expand

if typing.TYPE_CHECKING:
    from rmodgen.model.component import Component


class Visibility(Enum):
    """Access level modifier of a declaration."""

    PRIVATE = ""
    PUBLIC = "pub"
    CRATE_VISIBLE = "pub(crate)"

    def __str__(self) -> str:
        return self.value

    def prefix(self) -> str:
        """Keyword followed by a space, or nothing for private items."""
        return f"{self.value} " if self.value else ""


@dataclass(frozen=True)
class Field:
    """Named, typed member of a struct or struct-shaped enum variant."""

    name: str
    """The name of the field."""

    type: str
    """The declared type of the field (free-form)."""

    visibility: Visibility = Visibility.PRIVATE
    """Visibility of the field."""

    @classmethod
    def private(cls, name: str, type_: str) -> Field:
        return cls(name, type_, Visibility.PRIVATE)

    def declaration(self, with_visibility: bool = True) -> str:
        """Generate the field declaration ("[vis ]name: type")."""
        vis = self.visibility.prefix() if with_visibility else ""
        return f"{vis}{self.name}: {self.type}"


def lifetime_list(lifetimes: list[str]) -> str:
    """Comma separated lifetimes, each with its leading apostrophe."""
    return ", ".join(f"'{lifetime}" for lifetime in lifetimes)


def generic_clause(templates: list[str], lifetimes: list[str]) -> str:
    """Bracketed generic clause, lifetimes first.

    Example:
        >>> generic_clause(["T"], ["a", "b"])
        "<'a, 'b, T>"
        >>> generic_clause([], [])
        ""
    """
    params = [*(f"'{lifetime}" for lifetime in lifetimes), *templates]
    if not params:
        return ""
    return f"<{', '.join(params)}>"


def cfg_lines(cfg: str) -> LineBuffer:
    """Attribute line(s) placed right above a declaration."""
    return expand(cfg)


class RustGen(ABC):
    """Anything that renders to Rust source text."""

    @abstractmethod
    def generate(self, indent_level: int = 0) -> LineBuffer:
        """Generate the lines of this construct at the given nesting depth."""
        ...

    def render(self, indent_level: int = 0) -> str:
        """Generate the code and collapse it into a newline-terminated string."""
        return collapse(self.generate(indent_level)) + "\n"

    def __str__(self) -> str:
        return self.render(0)


class GenericParams:
    """Chainable lifetime/template setters for constructs with `templates` and `lifetimes`."""

    templates: list[str]
    lifetimes: list[str]

    def push_template(self, template_identifier: str) -> None:
        self.templates.append(template_identifier)

    def push_lifetime(self, lifetime_identifier: str) -> None:
        self.lifetimes.append(lifetime_identifier)

    def with_template(self, template_identifier: str) -> Self:
        self.push_template(template_identifier)
        return self

    def with_lifetime(self, lifetime_identifier: str) -> Self:
        self.push_lifetime(lifetime_identifier)
        return self

    def generics(self) -> str:
        return generic_clause(self.templates, self.lifetimes)


class Declared:
    """Chainable visibility/extra/cfg setters shared by item declarations."""

    visibility: Visibility
    extra: str
    cfg: str

    def set_visibility(self, visibility: Visibility) -> None:
        self.visibility = visibility

    def set_extra(self, extra: str) -> None:
        self.extra = extra

    def set_cfg(self, cfg: str) -> None:
        self.cfg = cfg

    def with_visibility(self, visibility: Visibility) -> Self:
        self.set_visibility(visibility)
        return self

    def with_extra(self, extra: str) -> Self:
        self.set_extra(extra)
        return self

    def with_cfg(self, cfg: str) -> Self:
        self.set_cfg(cfg)
        return self


def render_children(
    components: list[Component],
    indent_level: int,
    separator: LineBuffer | None = None,
) -> LineBuffer:
    """Render child components one level deeper than their parent."""
    return concat([expand(component.render(indent_level + 1)) for component in components], separator)
