#!/usr/bin/env python3

import pytest

from swagger_to_code.pipeline.analyzer import ReferenceResolver, TypeKind, TypeRef, TypeResolver
from swagger_to_code.pipeline.schema_model import Reference, SchemaNode, parse_document


def make_resolver(definitions: dict | None = None) -> TypeResolver:
    document = parse_document({"definitions": definitions or {}})
    return TypeResolver(ReferenceResolver(document))


def schema(**kwargs) -> SchemaNode:
    return parse_document({"definitions": {"S": kwargs}}).definitions["S"]


class TestMapSchemaType:
    """Test cases for mapping schema nodes to IR types"""

    @pytest.mark.parametrize(
        "fmt,kind",
        [
            (None, TypeKind.ISIZE),
            ("int", TypeKind.ISIZE),
            ("uint", TypeKind.USIZE),
            ("int8", TypeKind.I8),
            ("uint8", TypeKind.U8),
            ("int16", TypeKind.I16),
            ("uint16", TypeKind.U16),
            ("int32", TypeKind.I32),
            ("uint32", TypeKind.U32),
            ("int64", TypeKind.I64),
            ("uint64", TypeKind.U64),
        ],
    )
    def test_integer_formats(self, fmt, kind):
        node = SchemaNode(type="integer", format=fmt)
        assert make_resolver().map_schema_type(node) == TypeRef.primitive(kind)

    @pytest.mark.parametrize("fmt", ["date-time", "DateTime", "date time", "DATE-TIME"])
    def test_date_time_formats(self, fmt):
        node = SchemaNode(type="string", format=fmt)
        assert make_resolver().map_schema_type(node) == TypeRef.primitive(TypeKind.DATE_TIME)

    def test_strings(self):
        resolver = make_resolver()
        assert resolver.map_schema_type(SchemaNode(type="string")) == TypeRef.primitive(TypeKind.STRING)
        assert resolver.map_schema_type(SchemaNode(type="string", format="uuid")) == TypeRef.primitive(TypeKind.STRING)
        assert resolver.map_schema_type(SchemaNode(type="string", format="binary")) == TypeRef.list_of(
            TypeRef.primitive(TypeKind.U8)
        )

    def test_numbers(self):
        resolver = make_resolver()
        assert resolver.map_schema_type(SchemaNode(type="number", format="double")) == TypeRef.primitive(TypeKind.F64)
        assert resolver.map_schema_type(SchemaNode(type="number", format="float")) == TypeRef.primitive(TypeKind.F32)
        assert resolver.map_schema_type(SchemaNode(type="number")) is None

    def test_unmappable_tags(self):
        resolver = make_resolver()
        assert resolver.map_schema_type(SchemaNode()) is None
        assert resolver.map_schema_type(SchemaNode(type="file")) is None

    def test_optional_values_are_wrapped_once(self):
        resolver = make_resolver()
        result = resolver.map_schema_type(SchemaNode(type="boolean"), is_required=False)
        assert result == TypeRef.nullable(TypeRef.primitive(TypeKind.BOOL))
        assert result.is_nullable
        assert result.unwrap_nullable() == TypeRef.primitive(TypeKind.BOOL)
        assert TypeRef.nullable(result) == result

    def test_array_items_are_never_optional(self):
        resolver = make_resolver()
        node = schema(type="array", items={"type": "string"})
        assert resolver.map_schema_type(node, is_required=False) == TypeRef.nullable(
            TypeRef.list_of(TypeRef.primitive(TypeKind.STRING))
        )
        assert resolver.map_schema_type(SchemaNode(type="array")) is None

    def test_array_with_reference_hint(self):
        node = schema(type="array", items={"type": "string"})
        assert make_resolver().map_schema_type(node, ref_hint="Tags") == TypeRef.named("Tags")

    def test_map_types(self):
        """Scenario: additionalProperties without properties is a map, not a record"""
        resolver = make_resolver()
        node = schema(type="object", additionalProperties={"type": "integer"})
        assert resolver.map_schema_type(node) == TypeRef.map_of(TypeRef.primitive(TypeKind.ISIZE))

        legacy = schema(type="object", items={"type": "boolean"})
        assert resolver.map_schema_type(legacy) == TypeRef.map_of(TypeRef.primitive(TypeKind.BOOL))

        untyped = schema(type="object", additionalProperties=True)
        assert resolver.map_schema_type(untyped) == TypeRef.map_of(TypeRef.untyped())

    def test_object_names(self):
        resolver = make_resolver()
        assert resolver.map_schema_type(schema(type="object", title="Point", properties={})) == TypeRef.named("Point")
        assert resolver.map_schema_type(
            schema(type="object", title="Point", **{"x-go-name": "GoPoint"}, properties={})
        ) == TypeRef.named("GoPoint")
        assert resolver.map_schema_type(schema(type="object", properties={}), parent_name="Ownerad") == TypeRef.named(
            "OwneradInlineItem"
        )
        assert resolver.map_schema_type(schema(type="object", properties={})) == TypeRef.untyped()
        assert resolver.map_schema_type(SchemaNode(type="object")) == TypeRef.untyped()

    def test_reference_hint_wins_over_structure(self):
        node = schema(type="object", additionalProperties={"type": "integer"})
        assert make_resolver().map_schema_type(node, ref_hint="Labels") == TypeRef.named("Labels")


class TestMapReferenceType:
    """Test cases for mapping references"""

    def test_referenced_object(self, petstore):
        resolver = TypeResolver(ReferenceResolver(petstore))
        assert resolver.map_reference_type("#/definitions/Owner") == TypeRef.named("Owner")
        assert resolver.map_reference_type("#/definitions/Owner", is_required=False) == TypeRef.nullable(
            TypeRef.named("Owner")
        )

    def test_referenced_array(self, petstore):
        resolver = TypeResolver(ReferenceResolver(petstore))
        assert resolver.map_reference_type("#/definitions/Pets") == TypeRef.named("Pets")

    def test_referenced_primitive(self):
        resolver = make_resolver({"Id": {"type": "integer", "format": "int64"}})
        assert resolver.map_reference_type("#/definitions/Id") == TypeRef.primitive(TypeKind.I64)

    def test_referenced_composition(self, petstore):
        """Composed targets are merged so they map through their components' type"""
        resolver = TypeResolver(ReferenceResolver(petstore))
        assert resolver.map_reference_type("#/definitions/NewPet") == TypeRef.named("NewPet")

    def test_unresolved_reference(self, caplog):
        assert make_resolver().map_reference_type("#/definitions/Missing") is None
        assert "unresolved reference" in caplog.text

    def test_map_item_type(self, petstore):
        resolver = TypeResolver(ReferenceResolver(petstore))
        assert resolver.map_item_type(Reference("#/definitions/Owner")) == TypeRef.named("Owner")
        assert resolver.map_item_type(SchemaNode(type="string"), is_required=False) == TypeRef.nullable(
            TypeRef.primitive(TypeKind.STRING)
        )

    def test_fallback(self):
        assert TypeResolver.fallback() == TypeRef.nullable(TypeRef.untyped())


if __name__ == "__main__":
    pytest.main([__file__])
