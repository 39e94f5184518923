"""
Type resolver mapping schema nodes to target types.

Every unmappable case yields None. Callers that need a concrete type
substitute `TypeResolver.fallback()` so one unresolvable field never
blocks the rest of the document.
"""

from __future__ import annotations

import logging

from ..schema_model.nodes import Item, Reference, SchemaNode, trim_reference
from .composition import merge_all_of
from .ir_nodes import INTEGER_FORMATS, TypeKind, TypeRef
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

DATE_TIME_FORMATS = frozenset({"date-time", "datetime", "date time"})


class TypeResolver:
    """Maps schema nodes to IR types."""

    def __init__(self, resolver: ReferenceResolver):
        self.resolver = resolver

    @staticmethod
    def fallback() -> TypeRef:
        """Type used for fields whose schema could not be mapped."""
        return TypeRef.nullable(TypeRef.untyped())

    def map_item_type(self, item: Item, is_required: bool = True, parent_name: str | None = None) -> TypeRef | None:
        """Map a property value, array item or map value."""
        if isinstance(item, Reference):
            return self.map_reference_type(item.ref, is_required, parent_name)
        return self.map_schema_type(item, None, is_required, parent_name)

    def map_reference_type(self, ref: str, is_required: bool = True, parent_name: str | None = None) -> TypeRef | None:
        """
        Map the schema a reference points at.

        The namespace-trimmed reference is passed on as the reference hint so
        arrays and objects reached through it become named types instead of
        being inlined.
        """
        logger.debug("mapping reference `%s`, required: %s, parent: %s", ref, is_required, parent_name)
        schema = self.resolver.resolve(ref)
        if schema is None:
            logger.warning("unresolved reference `%s`", ref)
            return None
        schema = merge_all_of(schema, self.resolver)
        return self.map_schema_type(schema, trim_reference(ref), is_required, parent_name)

    def map_schema_type(
        self,
        schema: SchemaNode,
        ref_hint: str | None = None,
        is_required: bool = True,
        parent_name: str | None = None,
    ) -> TypeRef | None:
        """
        Map a schema node to its target type.

        Args:
            schema: The schema to map
            ref_hint: Trimmed reference name when the schema was reached via $ref
            is_required: Whether the value is required; optional values are nullable
            parent_name: Name hint for anonymous inline objects

        Returns:
            The target type, or None when the schema cannot be represented
        """
        if schema.type is None:
            return None
        logger.debug(
            "mapping schema type, type: %s, ref: %s, required: %s, parent: %s",
            schema.type,
            ref_hint,
            is_required,
            parent_name,
        )

        if schema.type == "integer":
            result = TypeRef.primitive(INTEGER_FORMATS.get(schema.format, TypeKind.ISIZE))
        elif schema.type == "string":
            result = self._map_string(schema)
        elif schema.type == "boolean":
            result = TypeRef.primitive(TypeKind.BOOL)
        elif schema.type == "array":
            result = self._map_array(schema, ref_hint, parent_name)
        elif schema.type == "object":
            result = self._map_object(schema, ref_hint, parent_name)
        elif schema.type == "number":
            result = self._map_number(schema)
        else:
            logger.debug("unknown schema type `%s`", schema.type)
            result = None

        if result is None:
            return None
        if not is_required:
            result = TypeRef.nullable(result)
        return result

    def _map_string(self, schema: SchemaNode) -> TypeRef:
        fmt = schema.format.lower() if schema.format else None
        if fmt in DATE_TIME_FORMATS:
            return TypeRef.primitive(TypeKind.DATE_TIME)
        if fmt == "binary":
            return TypeRef.list_of(TypeRef.primitive(TypeKind.U8))
        return TypeRef.primitive(TypeKind.STRING)

    def _map_number(self, schema: SchemaNode) -> TypeRef | None:
        if schema.format == "double":
            return TypeRef.primitive(TypeKind.F64)
        if schema.format == "float":
            return TypeRef.primitive(TypeKind.F32)
        return None

    def _map_array(self, schema: SchemaNode, ref_hint: str | None, parent_name: str | None) -> TypeRef | None:
        # An array definition reached by reference is used through its alias
        if ref_hint is not None:
            return TypeRef.named(ref_hint)
        if schema.items is None:
            return None
        # Array elements are never individually optional
        item = self.map_item_type(schema.items, True, parent_name)
        if item is None:
            return None
        return TypeRef.list_of(item)

    def _map_object(self, schema: SchemaNode, ref_hint: str | None, parent_name: str | None) -> TypeRef | None:
        if ref_hint is not None:
            return TypeRef.named(ref_hint)

        # Legacy documents put the value schema of a map under `items`
        value_schema = schema.additional_properties or schema.items
        if value_schema is not None:
            value = self.map_item_type(value_schema, True, parent_name)
            if value is None:
                return None
            return TypeRef.map_of(value)

        if schema.properties is not None:
            name = schema.name()
            if name:
                return TypeRef.named(name)
            if parent_name:
                return TypeRef.named(f"{parent_name}InlineItem")

        return TypeRef.untyped()
