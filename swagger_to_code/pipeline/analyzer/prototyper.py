"""
Model prototyper.

Walks a document once and collects every schema that must become a
declaration, including anonymous inline objects, arrays of objects and
string enumerations, with deterministic synthetic names.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from ...utils import snake_to_pascal_case
from ..schema_model.nodes import Document, Item, Operation, PathExtension, Reference, SchemaNode
from .composition import merge_all_of
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

INLINE_ITEM_SUFFIX = "InlineItem"


@dataclass(frozen=True)
class ModelPrototype:
    """One unit of to-be-emitted code.

    An empty `name` means "derive from the schema's declared name, else from
    `parent_name`".
    """

    name: str
    parent_name: str | None
    schema: Item

    @property
    def is_reference(self) -> bool:
        return isinstance(self.schema, Reference)

    @property
    def kind(self) -> str:
        return "reference" if self.is_reference else "object"


class Prototyper:
    """Collects model prototypes from a document."""

    def __init__(self, document: Document):
        self.document = document
        self.resolver = ReferenceResolver(document)
        self.prototypes: list[ModelPrototype] = []

    def generate_prototypes(self) -> list[ModelPrototype]:
        """
        Walk definitions, named responses and paths, in that order.

        Returns:
            The prototypes in discovery order
        """
        self.prototypes = []
        self._add_definition_models()
        self._add_response_models()
        self._add_path_models()
        return self.prototypes

    def add_ref_prototype(self, name: str, parent_name: str | None, ref: str) -> None:
        prototype = ModelPrototype(name=name, parent_name=parent_name, schema=Reference(ref))
        logger.debug("adding reference %s", prototype)
        self.prototypes.append(prototype)

    def add_schema_prototype(self, name: str, parent_name: str | None, schema: SchemaNode) -> None:
        """Register a schema and, depth first, every inline schema nested in it."""
        if name.endswith(INLINE_ITEM_SUFFIX) and schema.name():
            name = schema.name()
        logger.debug("adding schema prototype `%s`, parent: `%s`", name, parent_name)

        if schema.ref is not None:
            self.add_ref_prototype(name, parent_name, schema.ref)
            return

        if isinstance(schema.items, SchemaNode) and schema.items.is_object():
            child = schema.items
            self.add_schema_prototype(child.name() or f"{name}{INLINE_ITEM_SUFFIX}", parent_name, child)

        for prop_name, prop_schema in sorted((schema.properties or {}).items()):
            # Referenced targets are discovered through their own root
            if not isinstance(prop_schema, SchemaNode):
                continue
            child_name = prop_schema.name() or f"{name}{prop_name}{INLINE_ITEM_SUFFIX}"
            if prop_schema.is_object() and prop_schema.has_properties():
                self.add_schema_prototype(child_name, name, prop_schema)
            elif prop_schema.is_array():
                items = prop_schema.items
                if isinstance(items, SchemaNode) and items.is_object():
                    self.add_schema_prototype(child_name, name, items)
                else:
                    logger.debug("not collecting array property `%s` of `%s`", prop_name, name)
            elif prop_schema.is_string_enum():
                self.add_schema_prototype(child_name, name, prop_schema)

        prototype = ModelPrototype(name=name, parent_name=parent_name, schema=schema)
        logger.debug("adding object `%s`", name)
        self.prototypes.append(prototype)

    def _add_definition_models(self) -> None:
        logger.debug("adding definition models")
        if self.document.definitions is None:
            logger.debug("no definitions to process")
            return
        for name, schema in sorted(self.document.definitions.items()):
            logger.debug("processing definition `%s`", name)
            self.add_schema_prototype(name, None, merge_all_of(schema, self.resolver))

    def _add_response_models(self) -> None:
        logger.debug("adding responses models")
        if self.document.responses is None:
            logger.debug("no responses to process")
            return
        for name, response in sorted(self.document.responses.items()):
            logger.debug("processing response `%s`", name)
            if response.is_reference():
                self.add_ref_prototype(name, None, response.ref)
            elif response.schema is not None:
                schema = dataclasses.replace(response.schema, description=response.description or response.schema.description)
                self.add_schema_prototype(name, None, merge_all_of(schema, self.resolver))

    def _add_path_models(self) -> None:
        logger.debug("adding paths models")
        if self.document.paths is None:
            logger.debug("no paths to process")
            return
        for path, path_item in sorted(self.document.paths.items()):
            logger.debug("processing path `%s`", path)
            if isinstance(path_item, PathExtension):
                logger.info("skipping path extension `%s`: %r", path, path_item.value)
                continue
            for method, operation in path_item.operations():
                logger.debug("processing operation %s %s", method.upper(), path)
                self._add_operation_models(operation)

    def _add_operation_models(self, operation: Operation) -> None:
        operation_id = operation.operation_id or "InlineResponse"

        for code, response in sorted(operation.responses.items()):
            if response.is_reference() or response.schema is None:
                continue
            schema = dataclasses.replace(response.schema, description=response.description or response.schema.description)
            self.add_schema_prototype(f"{operation_id}{code}Response", None, merge_all_of(schema, self.resolver))

        for param in operation.parameters:
            if not param.is_body() or param.schema is None:
                continue
            name = f"{snake_to_pascal_case(operation_id)}{snake_to_pascal_case(param.name)}Param"
            self.add_schema_prototype(name, None, merge_all_of(param.schema, self.resolver))


def generate_prototypes(document: Document) -> list[ModelPrototype]:
    """Collect the model prototypes of a document."""
    return Prototyper(document).generate_prototypes()
