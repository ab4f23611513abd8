"""Descriptor frontend."""

import json
import logging
import pathlib

import pydantic
import tomli as tomllib

from rmodgen.frontend import schema
from rmodgen.model import (
    Component,
    EmptyVariant,
    Enum,
    EnumVariant,
    Field,
    Implementation,
    Method,
    Module,
    RustFile,
    Struct,
    StructVariant,
    Text,
    Trait,
    ValueVariant,
    Variable,
    VariableKind,
    Visibility,
)

logger = logging.getLogger(__name__)

_VISIBILITY = {
    "private": Visibility.PRIVATE,
    "pub": Visibility.PUBLIC,
    "pub(crate)": Visibility.CRATE_VISIBLE,
}


class DescriptorError(ValueError):
    """Raised for a descriptor that does not match the schema."""


def _field(model: schema.FieldModel) -> Field:
    return Field(model.name, model.type, _VISIBILITY[model.visibility])


def _variant(model: schema.VariantModel) -> EnumVariant:
    if model.fields is not None:
        return StructVariant(model.name, [_field(f) for f in model.fields])
    if model.values:
        return ValueVariant(model.name, list(model.values))
    return EmptyVariant(model.name)


def _impl(model: schema.ImplModel) -> Implementation:
    if model.name is not None:
        impl = Implementation(model.name)
    elif model.trait is not None:
        assert model.target is not None
        impl = Implementation.new_for(model.trait, model.target)
    else:
        assert model.target is not None
        impl = Implementation(model.target)
    for lifetime in model.lifetimes:
        impl.push_lifetime(lifetime)
    for template in model.templates:
        impl.push_template(template)
    impl.impl_lifetimes.extend(model.impl_lifetimes)
    impl.target_lifetimes.extend(model.target_lifetimes)
    impl.impl_templates.extend(model.impl_templates)
    impl.target_templates.extend(model.target_templates)
    impl.components = [component_from_model(item) for item in model.items]
    impl.extra = model.extra
    return impl


def component_from_model(model: schema.Item) -> Component:
    """Convert one validated descriptor item into a construct."""
    if isinstance(model, schema.StructModel):
        return Struct(
            name=model.name,
            fields=[_field(f) for f in model.fields],
            visibility=_VISIBILITY[model.visibility],
            lifetimes=list(model.lifetimes),
            templates=list(model.templates),
            extra=model.extra,
            cfg=model.cfg,
        )
    if isinstance(model, schema.EnumModel):
        return Enum(
            name=model.name,
            variants=[_variant(v) for v in model.variants],
            visibility=_VISIBILITY[model.visibility],
            lifetimes=list(model.lifetimes),
            templates=list(model.templates),
            extra=model.extra,
            cfg=model.cfg,
        )
    if isinstance(model, schema.MethodModel):
        return Method(
            name=model.name,
            fn_type=model.fn_type,
            visibility=_VISIBILITY[model.visibility],
            arguments=list(model.arguments),
            return_type=model.return_type,
            body=model.body,
            has_body=model.has_body,
            lifetimes=list(model.lifetimes),
            templates=list(model.templates),
        )
    if isinstance(model, schema.ImplModel):
        return _impl(model)
    if isinstance(model, schema.ModuleModel):
        return Module(
            name=model.name,
            visibility=_VISIBILITY[model.visibility],
            imports=list(model.imports),
            components=[component_from_model(item) for item in model.items],
            cfg=model.cfg,
        )
    if isinstance(model, schema.TraitModel):
        return Trait(
            name=model.name,
            visibility=_VISIBILITY[model.visibility],
            bounds=list(model.bounds),
            components=[component_from_model(item) for item in model.items],
            lifetimes=list(model.lifetimes),
            templates=list(model.templates),
            cfg=model.cfg,
            extra=model.extra,
        )
    if isinstance(model, schema.VariableModel):
        return Variable(
            name=model.name,
            kind=VariableKind(model.kind),
            value=model.value,
            type=model.type,
            is_mutable=model.mutable,
            visibility=_VISIBILITY[model.visibility],
        )
    if isinstance(model, schema.TextModel):
        return Text(model.text)
    assert False


def from_descriptor(descriptor: dict) -> RustFile:
    """Build a file from a descriptor dictionary.

    Example:
        >>> from_descriptor({"items": [{"kind": "struct", "name": "Unit"}]}).render()
        "struct Unit {\\n}\\n\\n"
    """
    try:
        model = schema.FileModel.model_validate(descriptor)
    except pydantic.ValidationError as e:
        raise DescriptorError(str(e)) from e

    file = RustFile(
        components=[component_from_model(item) for item in model.items],
        imports=list(model.imports),
        top=model.top,
        bottom=model.bottom,
    )
    if model.docstring:
        file.set_file_docstring(model.docstring)
    logger.debug("Descriptor with %d root items", len(file.components))
    return file


def load_descriptor(path: pathlib.Path) -> dict:
    """Read a JSON or TOML descriptor file."""
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
