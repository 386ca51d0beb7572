# instance_describer/adapters/schema.py
"""
Declarative descriptions as plain data.

Lets a description be authored as a mapping or a JSON document instead of
nested constructor calls:

    {
      "class_name": "Folder",
      "children": {
        "Obby": "Folder",
        "Spawn": {"is_a": "BasePart", "properties": {"Anchored": true}},
        "Music": "Sound?"
      }
    }

A child given as a string is shorthand for `of_class(<string>)`; a trailing
"?" wraps it in `optional`. A nested object is a full description and may
set `"optional": true`.

Unlike the core constructors, this layer validates its input: a malformed
document raises pydantic.ValidationError before any describer is built.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from instance_describer.core.domain.describers import Describer
from instance_describer.core.use_cases.describer_factory import DescriberFactory

OPTIONAL_SUFFIX = "?"


class DescriptionSchema(BaseModel):
    """
    Wire form of a Description.
    Children are class-name shorthands or nested schemas.
    """

    model_config = ConfigDict(extra="forbid")

    class_name: Optional[str] = None
    is_a: Optional[str] = None
    properties: Dict[str, Any] = Field(default_factory=dict)
    attributes: Dict[str, Any] = Field(default_factory=dict)
    children: Dict[str, Union[str, "DescriptionSchema"]] = Field(default_factory=dict)
    optional: bool = False


DescriptionSchema.model_rebuild()


def build_describer(
    schema: Union[DescriptionSchema, Dict[str, Any]],
    factory: Optional[DescriberFactory] = None,
) -> Describer:
    """
    Build a describer tree from a DescriptionSchema or an equivalent mapping.

    Raises:
        pydantic.ValidationError if a mapping does not fit the schema.
    """
    if factory is None:
        from instance_describer.shared.container import container

        factory = container.factory()

    if not isinstance(schema, DescriptionSchema):
        schema = DescriptionSchema.model_validate(schema)

    return _build(schema, factory)


def load_describer(document: Union[str, bytes], factory: Optional[DescriberFactory] = None) -> Describer:
    """Build a describer tree from a JSON document."""
    return build_describer(DescriptionSchema.model_validate_json(document), factory)


def _build(schema: DescriptionSchema, factory: DescriberFactory) -> Describer:
    children = {name: _build_child(child, factory) for name, child in schema.children.items()}

    describer = factory.new(
        class_name=schema.class_name,
        is_a=schema.is_a,
        properties=schema.properties or None,
        attributes=schema.attributes or None,
        children=children or None,
    )

    if schema.optional:
        return factory.optional(describer)
    return describer


def _build_child(child: Union[str, DescriptionSchema], factory: DescriberFactory) -> Describer:
    if isinstance(child, DescriptionSchema):
        return _build(child, factory)

    if child.endswith(OPTIONAL_SUFFIX):
        return factory.optional(factory.of_class(child[: -len(OPTIONAL_SUFFIX)]))
    return factory.of_class(child)
