"""
Reference resolver for $ref resolution.

Resolves $ref strings to the schema nodes they point at, using the
document's definitions and responses tables.
"""

from __future__ import annotations

import logging

from ..schema_model.nodes import DEFINITIONS_REF, RESPONSES_REF, Document, SchemaNode

logger = logging.getLogger(__name__)

# Maximum number of response-alias hops followed before giving up
MAX_REFERENCE_DEPTH = 32


class ReferenceResolver:
    """Resolves $ref to actual schema nodes."""

    def __init__(self, document: Document, max_depth: int = MAX_REFERENCE_DEPTH):
        """
        Initialize the resolver.

        Args:
            document: The parsed document whose tables are searched
            max_depth: Maximum length of a response-alias chain
        """
        self.document = document
        self.max_depth = max_depth

    def resolve(self, ref: str) -> SchemaNode | None:
        """
        Resolve a reference to its schema node.

        Args:
            ref: A "#/definitions/..." or "#/responses/..." reference

        Returns:
            The referenced schema, or None if the table is missing, the name is
            unknown or the alias chain never reaches a schema
        """
        logger.debug("getting schema for reference `%s`", ref)
        return self._resolve(ref, 0)

    def _resolve(self, ref: str, depth: int) -> SchemaNode | None:
        if ref.startswith(DEFINITIONS_REF):
            return self._resolve_definition(ref[len(DEFINITIONS_REF) :])
        if ref.startswith(RESPONSES_REF):
            return self._resolve_response(ref[len(RESPONSES_REF) :], depth)
        logger.debug("reference `%s` is outside the definitions and responses namespaces", ref)
        return None

    def _resolve_definition(self, name: str) -> SchemaNode | None:
        definitions = self.document.definitions
        if definitions is None:
            return None
        return definitions.get(name)

    def _resolve_response(self, name: str, depth: int) -> SchemaNode | None:
        responses = self.document.responses
        if responses is None:
            return None
        response = responses.get(name)
        if response is None:
            return None
        if response.is_reference():
            return self._follow(name, response.ref, depth)
        schema = response.schema
        # A response whose schema is a bare reference stands for the referenced schema
        if schema is not None and schema.ref is not None and not schema.all_of:
            return self._follow(name, schema.ref, depth)
        return schema

    def _follow(self, name: str, ref: str, depth: int) -> SchemaNode | None:
        if depth >= self.max_depth:
            logger.warning("giving up on reference `%s%s`, alias chain is longer than %d", RESPONSES_REF, name, self.max_depth)
            return None
        return self._resolve(ref, depth + 1)
