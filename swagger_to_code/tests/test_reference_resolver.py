#!/usr/bin/env python3

import logging

import pytest

from swagger_to_code.pipeline.analyzer import ReferenceResolver
from swagger_to_code.pipeline.schema_model import Document, parse_document


class TestReferenceResolver:
    """Test cases for $ref lookup"""

    def test_resolve_definition(self, petstore):
        resolver = ReferenceResolver(petstore)
        assert resolver.resolve("#/definitions/Pet") is petstore.definitions["Pet"]

    def test_resolve_inline_response(self, petstore):
        resolver = ReferenceResolver(petstore)
        assert resolver.resolve("#/responses/NotFound") is petstore.responses["NotFound"].schema

    def test_follow_response_alias(self, petstore):
        """A response alias resolves to the schema of its target"""
        resolver = ReferenceResolver(petstore)
        assert resolver.resolve("#/responses/PetList") is petstore.definitions["Pets"]

    def test_unknown_names(self, petstore):
        resolver = ReferenceResolver(petstore)
        assert resolver.resolve("#/definitions/Missing") is None
        assert resolver.resolve("#/responses/Missing") is None
        assert resolver.resolve("other.json#/Pet") is None

    def test_missing_tables(self):
        resolver = ReferenceResolver(Document())
        assert resolver.resolve("#/definitions/Pet") is None
        assert resolver.resolve("#/responses/Pet") is None

    def test_alias_cycle_fails_closed(self, caplog):
        """A circular response alias chain resolves to nothing instead of recursing forever"""
        document = parse_document(
            {
                "responses": {
                    "A": {"$ref": "#/responses/B"},
                    "B": {"$ref": "#/responses/A"},
                }
            }
        )
        resolver = ReferenceResolver(document)
        with caplog.at_level(logging.WARNING):
            assert resolver.resolve("#/responses/A") is None
        assert "alias chain is longer than" in caplog.text

    def test_max_depth(self):
        """Chains up to the configured depth are followed"""
        document = parse_document(
            {
                "definitions": {"Target": {"type": "string"}},
                "responses": {
                    "A": {"$ref": "#/responses/B"},
                    "B": {"$ref": "#/definitions/Target"},
                },
            }
        )
        assert ReferenceResolver(document, max_depth=2).resolve("#/responses/A").type == "string"
        assert ReferenceResolver(document, max_depth=1).resolve("#/responses/A") is None


if __name__ == "__main__":
    pytest.main([__file__])
