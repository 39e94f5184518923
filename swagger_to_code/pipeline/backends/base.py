"""
Base class for code generation backends.

Defines the interface that all language-specific backends implement and
the dispatch from a model prototype to a record, enumeration or alias
declaration shared by all of them.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ...utils import escape_keyword, snake_to_pascal_case, to_snake_case
from ..analyzer.composition import merge_all_of
from ..analyzer.ir_nodes import EnumMember, FieldDef, TypeKind, TypeRef
from ..analyzer.prototyper import INLINE_ITEM_SUFFIX, ModelPrototype
from ..analyzer.reference_resolver import ReferenceResolver
from ..analyzer.type_resolver import TypeResolver
from ..config import CodeGeneratorConfig
from ..registry import GeneratedNameRegistry
from ..schema_model.nodes import Document, Reference, SchemaNode

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates"


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Language name used on the command line
    LANGUAGE: str = ""

    # Type mapping from IR primitive kinds to language types
    TYPE_MAP: dict[TypeKind, str] = {}

    # Reserved words escaped with a trailing underscore
    KEYWORDS: frozenset[str] = frozenset()

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Line comment prefix used for doc comments
    COMMENT_PREFIX: str = "#"

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()
        self._document: Document | None = None
        self._type_resolver: TypeResolver | None = None
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR / self.TEMPLATE_LANG)),
            lstrip_blocks=True,
            trim_blocks=True,
            autoescape=False,
        )
        self.jinja_env.filters["quote"] = self.quote_string
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.record_template = self.jinja_env.get_template(f"record.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.alias_template = self.jinja_env.get_template(f"alias.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def render_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type expression.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def format_enum_member(self, value: str) -> str:
        """Format a string literal as an enumeration case name."""

    @abstractmethod
    def generate_helpers(self, document: Document) -> str:
        """
        Generate the code emitted once before all models (imports, shared helpers).

        Args:
            document: The parsed document

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        """Prepare the template context for a record field."""

    @staticmethod
    def quote_string(value: str) -> str:
        """Quote a string as a double-quoted literal."""
        return json.dumps(value, ensure_ascii=False)

    def format_type_name(self, name: str) -> str:
        """Format a schema name as a type identifier."""
        return escape_keyword(snake_to_pascal_case(name), self.KEYWORDS)

    def format_var_name(self, name: str) -> str:
        """Format a property name as a field identifier."""
        formatted = to_snake_case(name) or "field"
        if formatted[0].isdigit():
            formatted = f"_{formatted}"
        return escape_keyword(formatted, self.KEYWORDS)

    def generation_comment(self, text: str) -> str:
        """Render a header comment."""
        return "".join(f"{line}\n" for line in self._comment_lines(text)) + "\n"

    def generate_model(self, prototype: ModelPrototype, document: Document, registry: GeneratedNameRegistry) -> str:
        """
        Generate the declaration for one prototype.

        Args:
            prototype: The prototype to render
            document: The document the prototype was collected from
            registry: Names already emitted during this run

        Returns:
            The declaration, or an empty string if the prototype is skipped
        """
        type_resolver = self._resolver_for(document)
        logger.debug("generating %s `%s`", prototype.kind, prototype.name)
        if isinstance(prototype.schema, Reference):
            return self._generate_reference_model(prototype, prototype.schema.ref, type_resolver, registry)
        return self._generate_object_model(prototype, prototype.schema, type_resolver, registry)

    def _resolver_for(self, document: Document) -> TypeResolver:
        if self._document is not document or self._type_resolver is None:
            self._document = document
            self._type_resolver = TypeResolver(ReferenceResolver(document))
        return self._type_resolver

    def _generate_reference_model(
        self,
        prototype: ModelPrototype,
        ref: str,
        type_resolver: TypeResolver,
        registry: GeneratedNameRegistry,
    ) -> str:
        resolver = type_resolver.resolver
        schema = resolver.resolve(ref)
        if schema is None:
            logger.warning("skipping `%s`, reference `%s` does not resolve", prototype.name, ref)
            return ""
        schema = merge_all_of(schema, resolver)
        if not self._has_generatable_shape(schema, type_resolver):
            logger.debug("skipping `%s`, referenced schema has nothing to generate", prototype.name)
            return ""

        type_ref = type_resolver.map_reference_type(ref, True, prototype.name)
        if type_ref is None:
            logger.debug("skipping `%s`, reference `%s` does not map to a type", prototype.name, ref)
            return ""
        return self._generate_alias(prototype.name, type_ref, schema.description, registry)

    def _generate_object_model(
        self,
        prototype: ModelPrototype,
        schema: SchemaNode,
        type_resolver: TypeResolver,
        registry: GeneratedNameRegistry,
    ) -> str:
        schema = merge_all_of(schema, type_resolver.resolver)
        name = prototype.name
        if not name:
            name = schema.name() or (f"{prototype.parent_name}{INLINE_ITEM_SUFFIX}" if prototype.parent_name else "")
        if not name:
            logger.warning("skipping anonymous schema without a parent name")
            return ""
        logger.debug("handling schema `%s`, parent: %s", name, prototype.parent_name)

        if schema.properties is not None:
            return self._generate_record(name, schema, type_resolver, registry)
        if schema.is_array():
            return self._generate_array_alias(name, schema, type_resolver, registry)
        if schema.is_string_enum():
            return self._generate_enum(name, schema, registry)
        if schema.ref is not None:
            logger.error("got unhandled reference schema `%s`", schema.ref)
            return ""

        type_ref = type_resolver.map_schema_type(schema, None, True, name)
        if type_ref is None:
            logger.debug("skipping schema `%s`, nothing to generate", name)
            return ""
        return self._generate_alias(name, type_ref, schema.description, registry)

    def _has_generatable_shape(self, schema: SchemaNode, type_resolver: TypeResolver) -> bool:
        """Whether a schema carries properties, an array, an enum or a mappable primitive."""
        return (
            schema.properties is not None
            or schema.is_array()
            or schema.is_enum()
            or type_resolver.map_schema_type(schema, None, True, None) is not None
        )

    def _claim(self, type_name: str, registry: GeneratedNameRegistry, rhs: str | None = None) -> bool:
        if type_name in self.config.ignore_models:
            logger.info("skipping ignored model `%s`", type_name)
            return False
        return registry.claim(type_name, rhs)

    def _generate_record(
        self,
        name: str,
        schema: SchemaNode,
        type_resolver: TypeResolver,
        registry: GeneratedNameRegistry,
    ) -> str:
        logger.debug("handling property schema `%s`", name)
        type_name = self.format_type_name(name)
        if not self._claim(type_name, registry):
            return ""

        fields = []
        field_names: set[str] = set()
        for prop, item in sorted(schema.properties.items()):
            field_name = self.format_var_name(prop)
            if field_name in field_names:
                logger.warning("skipping property `%s` of `%s`, field `%s` already exists", prop, type_name, field_name)
                continue
            field_names.add(field_name)
            is_required = prop in schema.required
            logger.debug("handling property `%s`, required: %s", prop, is_required)
            if isinstance(item, Reference):
                type_ref = type_resolver.map_reference_type(item.ref, is_required, prop)
                description = None
            else:
                type_ref = type_resolver.map_item_type(item, is_required, f"{type_name}{prop}")
                description = item.description
            if type_ref is None:
                logger.debug("falling back to an untyped value for `%s.%s`", type_name, prop)
                type_ref = type_resolver.fallback()
            fields.append(
                FieldDef(
                    name=field_name,
                    original_name=prop,
                    type_ref=type_ref,
                    is_required=is_required,
                    description=description,
                )
            )

        return self._render(
            self.record_template,
            TYPE_NAME=type_name,
            doc_lines=self._comment_lines(schema.description),
            fields=[self._prepare_field_context(field) for field in self._order_fields(fields)],
        )

    def _order_fields(self, fields: list[FieldDef]) -> list[FieldDef]:
        """Order fields for the target language. Default keeps property-name order."""
        return list(fields)

    def _generate_array_alias(
        self,
        name: str,
        schema: SchemaNode,
        type_resolver: TypeResolver,
        registry: GeneratedNameRegistry,
    ) -> str:
        logger.debug("handling array schema `%s`", name)
        if schema.items is None:
            logger.debug("skipping array `%s` without items", name)
            return ""
        item_type = type_resolver.map_item_type(schema.items, True, name)
        if item_type is None:
            logger.debug("skipping array `%s`, item type does not map", name)
            return ""
        return self._generate_alias(name, TypeRef.list_of(item_type), schema.description, registry)

    def _generate_enum(self, name: str, schema: SchemaNode, registry: GeneratedNameRegistry) -> str:
        logger.debug("handling enum schema `%s`", name)
        type_name = self.format_type_name(name)

        members: list[EnumMember] = []
        member_names: set[str] = set()
        for value in schema.enum:
            if not isinstance(value, str):
                logger.warning("skipping non-string literal %r of enum `%s`", value, type_name)
                continue
            member_name = self.format_enum_member(value)
            if member_name in member_names:
                logger.warning("skipping literal %r of enum `%s`, case `%s` already exists", value, type_name, member_name)
                continue
            member_names.add(member_name)
            members.append(EnumMember(name=member_name, value=value))

        if not members:
            logger.warning("skipping enum `%s` without string literals", type_name)
            return ""
        if not self._claim(type_name, registry):
            return ""

        return self._render(
            self.enum_template,
            TYPE_NAME=type_name,
            doc_lines=self._comment_lines(schema.description),
            members=members,
        )

    def _generate_alias(
        self,
        name: str,
        type_ref: TypeRef,
        description: str | None,
        registry: GeneratedNameRegistry,
    ) -> str:
        type_name = self.format_type_name(name)
        rhs = self.render_type(type_ref)
        logger.debug("handling type alias %s = %s", type_name, rhs)
        if not self._claim(type_name, registry, rhs):
            return ""
        return self._render(
            self.alias_template,
            TYPE_NAME=type_name,
            TYPE=rhs,
            doc_lines=self._comment_lines(description),
        )

    def _comment_lines(self, text: str | None, indent: str = "") -> list[str]:
        """Render text as line comments, one per source line."""
        if not text:
            return []
        return [f"{indent}{self.COMMENT_PREFIX} {line}".rstrip() for line in text.splitlines()]

    def _render(self, template: jinja2.Template, **context: Any) -> str:
        return template.render(**context).rstrip("\n") + "\n\n"
