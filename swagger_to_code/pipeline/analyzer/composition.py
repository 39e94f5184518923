"""
allOf composition merging.

Flattens an allOf list into a single synthesized schema. The merge is
one level deep: a component's own allOf is left untouched.
"""

from __future__ import annotations

import logging

from ..schema_model.nodes import SchemaNode
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

# Scalar fields copied from the first component that sets them
_FIRST_WINS_FIELDS = ("format", "title", "description", "type")


def merge_all_of(schema: SchemaNode, resolver: ReferenceResolver) -> SchemaNode:
    """
    Merge the allOf components of a schema.

    Properties are unioned with later components overwriting earlier ones,
    scalar fields keep the first non-null value, and the required and enum
    lists come wholesale from the first component that has a non-empty one.

    Args:
        schema: The schema to flatten
        resolver: Resolver used for bare-reference components

    Returns:
        The merged schema, or `schema` itself when it has no allOf
    """
    if not schema.all_of:
        return schema

    merged = {
        "title": schema.title,
        "description": schema.description,
        "format": None,
        "type": None,
        "required": (),
        "enum": (),
    }
    properties = {}

    for component in schema.all_of:
        if component.ref is not None:
            resolved = resolver.resolve(component.ref)
            if resolved is None:
                logger.warning("could not resolve allOf component `%s`", component.ref)
            else:
                component = resolved

        if component.properties:
            properties.update(component.properties)

        for name in _FIRST_WINS_FIELDS:
            if merged[name] is None and getattr(component, name) is not None:
                merged[name] = getattr(component, name)

        if not merged["required"] and component.required:
            merged["required"] = component.required

        if not merged["enum"] and component.enum:
            merged["enum"] = component.enum

    return SchemaNode(properties=properties, **merged)
