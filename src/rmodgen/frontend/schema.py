from typing import Annotated, Literal, Optional, Self, Union

import pydantic
from pydantic import StringConstraints

StringProperty = Annotated[str, StringConstraints(min_length=1)]
VisibilityProperty = Literal["private", "pub", "pub(crate)"]


class _Model(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid", populate_by_name=True)


class FieldModel(_Model):
    """Named struct field."""

    name: StringProperty
    type: StringProperty
    visibility: VisibilityProperty = "private"


class VariantModel(_Model):
    """Enum variant. `fields` makes a struct variant, `values` a positional one, neither an empty one."""

    name: StringProperty
    fields: Optional[list[FieldModel]] = None
    values: Optional[list[str]] = None

    @pydantic.model_validator(mode="after")
    def validate_shape(self) -> Self:
        if self.fields is not None and self.values is not None:
            raise ValueError(f"Variant '{self.name}' cannot have both 'fields' and 'values'")
        return self


class _Generic(_Model):
    lifetimes: list[str] = pydantic.Field(default_factory=list)
    templates: list[str] = pydantic.Field(default_factory=list)


class StructModel(_Generic):
    kind: Literal["struct"]
    name: StringProperty
    visibility: VisibilityProperty = "private"
    fields: list[FieldModel] = pydantic.Field(default_factory=list)
    extra: str = ""
    cfg: str = ""


class EnumModel(_Generic):
    kind: Literal["enum"]
    name: StringProperty
    visibility: VisibilityProperty = "private"
    variants: list[VariantModel] = pydantic.Field(default_factory=list)
    extra: str = ""
    cfg: str = ""


class MethodModel(_Generic):
    kind: Literal["fn"]
    name: StringProperty
    visibility: VisibilityProperty = "private"
    fn_type: str = pydantic.Field(alias="fn-type", default="")
    arguments: list[str] = pydantic.Field(default_factory=list)
    return_type: str = pydantic.Field(alias="return-type", default="")
    body: str = ""
    has_body: bool = pydantic.Field(alias="has-body", default=True)


class ImplModel(_Generic):
    """`impl` block. Either `name` (inherent impl) or `trait` plus `target`.

    `lifetimes` and `templates` apply to both sides; the `impl-*` and `target-*`
    lists apply to one side only.
    """

    kind: Literal["impl"]
    name: Optional[StringProperty] = None
    trait: Optional[StringProperty] = None
    target: Optional[StringProperty] = None
    impl_lifetimes: list[str] = pydantic.Field(alias="impl-lifetimes", default_factory=list)
    target_lifetimes: list[str] = pydantic.Field(alias="target-lifetimes", default_factory=list)
    impl_templates: list[str] = pydantic.Field(alias="impl-templates", default_factory=list)
    target_templates: list[str] = pydantic.Field(alias="target-templates", default_factory=list)
    items: list["Item"] = pydantic.Field(default_factory=list)
    extra: str = ""

    @pydantic.model_validator(mode="after")
    def validate_target(self) -> Self:
        if self.name is None and self.target is None:
            raise ValueError("'impl' requires either 'name' or 'target'")
        if self.name is not None and (self.trait is not None or self.target is not None):
            raise ValueError("'impl' takes either 'name' or 'trait'/'target', not both")
        if self.trait is not None and self.target is None:
            raise ValueError("'trait' requires 'target'")
        return self


class ModuleModel(_Model):
    kind: Literal["mod"]
    name: StringProperty
    visibility: VisibilityProperty = "private"
    imports: list[str] = pydantic.Field(default_factory=list)
    items: list["Item"] = pydantic.Field(default_factory=list)
    cfg: str = ""


class TraitModel(_Generic):
    kind: Literal["trait"]
    name: StringProperty
    visibility: VisibilityProperty = "private"
    bounds: list[str] = pydantic.Field(default_factory=list)
    items: list["Item"] = pydantic.Field(default_factory=list)
    cfg: str = ""
    extra: str = ""


class VariableModel(_Model):
    kind: Literal["let", "const", "static"]
    name: StringProperty
    visibility: VisibilityProperty = "private"
    type: str = ""
    value: str = ""
    mutable: bool = pydantic.Field(alias="mut", default=False)


class TextModel(_Model):
    kind: Literal["text"]
    text: str


Item = Annotated[
    Union[StructModel, EnumModel, MethodModel, ImplModel, ModuleModel, TraitModel, VariableModel, TextModel],
    pydantic.Field(discriminator="kind"),
]


class FileModel(_Model):
    """A whole file."""

    docstring: Optional[str] = None
    imports: list[str] = pydantic.Field(default_factory=list)
    top: str = ""
    bottom: str = ""
    items: list[Item] = pydantic.Field(default_factory=list)


ImplModel.model_rebuild()
ModuleModel.model_rebuild()
TraitModel.model_rebuild()
FileModel.model_rebuild()
