from __future__ import annotations

import typing
from dataclasses import dataclass, field
from typing import Self

from rmodgen.linebuffer import LineBuffer, indent
from rmodgen.model.core import RustGen, generic_clause, render_children

if typing.TYPE_CHECKING:
    from rmodgen.model.component import Component


@dataclass
class Implementation(RustGen):
    """An `impl` block, inherent or `Trait for Type`.

    Generics are tracked separately for the `impl<...>` side and the target side.
    """

    name: str
    components: list[Component] = field(default_factory=list)
    impl_lifetimes: list[str] = field(default_factory=list)
    target_lifetimes: list[str] = field(default_factory=list)
    impl_templates: list[str] = field(default_factory=list)
    target_templates: list[str] = field(default_factory=list)
    extra: str = ""
    """Raw text between the target generics and the opening brace (e.g. a where-clause)."""

    @classmethod
    def new_for(cls, trait_name: str, target: str) -> Implementation:
        return cls(f"{trait_name} for {target}")

    def push_component(self, component: Component) -> None:
        self.components.append(component)

    def push_lifetime(self, lifetime: str) -> None:
        """Add a lifetime to both the impl side and the target side."""
        self.push_impl_lifetime(lifetime)
        self.push_target_lifetime(lifetime)

    def push_impl_lifetime(self, lifetime: str) -> None:
        self.impl_lifetimes.append(lifetime)

    def push_target_lifetime(self, lifetime: str) -> None:
        self.target_lifetimes.append(lifetime)

    def push_template(self, template: str) -> None:
        """Add a template to both the impl side and the target side."""
        self.push_impl_template(template)
        self.push_target_template(template)

    def push_impl_template(self, template: str) -> None:
        self.impl_templates.append(template)

    def push_target_template(self, template: str) -> None:
        self.target_templates.append(template)

    def set_extra(self, extra: str) -> None:
        self.extra = extra

    def with_component(self, component: Component) -> Self:
        self.push_component(component)
        return self

    def with_lifetime(self, lifetime: str) -> Self:
        self.push_lifetime(lifetime)
        return self

    def with_impl_lifetime(self, lifetime: str) -> Self:
        self.push_impl_lifetime(lifetime)
        return self

    def with_target_lifetime(self, lifetime: str) -> Self:
        self.push_target_lifetime(lifetime)
        return self

    def with_template(self, template: str) -> Self:
        self.push_template(template)
        return self

    def with_impl_template(self, template: str) -> Self:
        self.push_impl_template(template)
        return self

    def with_target_template(self, template: str) -> Self:
        self.push_target_template(template)
        return self

    def with_extra(self, extra: str) -> Self:
        self.set_extra(extra)
        return self

    def generate(self, indent_level: int = 0) -> LineBuffer:
        impl_generics = generic_clause(self.impl_templates, self.impl_lifetimes)
        target_generics = generic_clause(self.target_templates, self.target_lifetimes)
        extra = f" {self.extra}" if self.extra else ""
        return [
            *indent([f"impl{impl_generics} {self.name}{target_generics}{extra} {{"], indent_level),
            *render_children(self.components, indent_level, [""]),
            *indent(["}"], indent_level),
        ]
