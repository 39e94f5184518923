"""
Swagger v2 document parser.

Turns the structured value produced by a JSON or YAML loader into the
immutable schema model. This is the parse boundary: structural problems
raise DocumentError here, before the generation pipeline runs.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import DocumentError
from .nodes import (
    HTTP_METHODS,
    Document,
    Item,
    Operation,
    Parameter,
    PathExtension,
    PathItem,
    Reference,
    Response,
    SchemaNode,
)

logger = logging.getLogger(__name__)


class DocumentParser:
    """Parses a Swagger v2 mapping into a Document."""

    def parse(self, data: Any) -> Document:
        """
        Parse a Swagger v2 document.

        Args:
            data: The loaded JSON/YAML document

        Returns:
            The parsed Document

        Raises:
            DocumentError: If the document structure is malformed
        """
        self._expect_mapping(data, "#")

        definitions = None
        if data.get("definitions") is not None:
            raw = self._expect_mapping(data["definitions"], "#/definitions")
            definitions = {str(name): self.parse_schema(schema, f"#/definitions/{name}") for name, schema in raw.items()}

        responses = None
        if data.get("responses") is not None:
            responses = self._parse_responses(data["responses"], "#/responses")

        paths = None
        if data.get("paths") is not None:
            paths = self._parse_paths(data["paths"])

        return Document(
            swagger=str(data.get("swagger", "2.0")),
            definitions=definitions,
            responses=responses,
            paths=paths,
        )

    def parse_schema(self, data: Any, path: str) -> SchemaNode:
        """Parse one schema node."""
        self._expect_mapping(data, path)

        ref = data.get("$ref")
        if ref is not None and not isinstance(ref, str):
            raise DocumentError(f"invalid reference `{ref!r}`", path)

        properties = None
        if data.get("properties") is not None:
            raw = self._expect_mapping(data["properties"], f"{path}/properties")
            properties = {str(name): self.parse_item(value, f"{path}/properties/{name}") for name, value in raw.items()}

        items = None
        if data.get("items") is not None:
            items = self.parse_item(data["items"], f"{path}/items")

        additional_properties = None
        raw_additional = data.get("additionalProperties")
        if raw_additional is True:
            # An open map of untyped values
            additional_properties = SchemaNode(type="object")
        elif raw_additional is not None and raw_additional is not False:
            additional_properties = self.parse_item(raw_additional, f"{path}/additionalProperties")

        all_of = ()
        if data.get("allOf") is not None:
            raw = self._expect_list(data["allOf"], f"{path}/allOf")
            all_of = tuple(self.parse_schema(component, f"{path}/allOf/{i}") for i, component in enumerate(raw))

        required = ()
        if data.get("required") is not None:
            raw = data["required"]
            # Swagger allows a boolean `required` on non-schema objects; only lists name properties
            if isinstance(raw, list):
                required = tuple(str(name) for name in raw)

        enum = ()
        if data.get("enum") is not None:
            enum = tuple(self._expect_list(data["enum"], f"{path}/enum"))

        return SchemaNode(
            ref=ref,
            format=self._optional_str(data, "format", path),
            title=self._optional_str(data, "title", path),
            description=self._optional_str(data, "description", path),
            required=required,
            type=self._optional_str(data, "type", path),
            items=items,
            properties=properties,
            additional_properties=additional_properties,
            enum=enum,
            all_of=all_of,
            x_go_name=self._optional_str(data, "x-go-name", path),
        )

    def parse_item(self, data: Any, path: str) -> Item:
        """Parse a property value, array item or map value."""
        if isinstance(data, str):
            return Reference(data)
        self._expect_mapping(data, path)
        if "$ref" in data:
            ref = data["$ref"]
            if not isinstance(ref, str):
                raise DocumentError(f"invalid reference `{ref!r}`", path)
            return Reference(ref)
        return self.parse_schema(data, path)

    def _parse_responses(self, data: Any, path: str) -> dict[str, Response]:
        raw = self._expect_mapping(data, path)
        # Status codes may come back from YAML as integers
        return {str(code): self._parse_response(value, f"{path}/{code}") for code, value in raw.items()}

    def _parse_response(self, data: Any, path: str) -> Response:
        self._expect_mapping(data, path)
        description = self._optional_str(data, "description", path)

        if "$ref" in data:
            ref = data["$ref"]
            if not isinstance(ref, str):
                raise DocumentError(f"invalid reference `{ref!r}`", path)
            return Response(ref=ref, description=description)

        schema = data.get("schema")
        if schema is None:
            return Response(description=description)
        if not isinstance(schema, dict):
            raise DocumentError("invalid schema, expected mapping", f"{path}/schema")

        return Response(description=description, schema=self.parse_schema(schema, f"{path}/schema"))

    def _parse_paths(self, data: Any) -> dict[str, PathItem | PathExtension]:
        raw = self._expect_mapping(data, "#/paths")
        paths: dict[str, PathItem | PathExtension] = {}
        for key, value in raw.items():
            if not isinstance(key, str):
                logger.warning("ignoring non-string path key %r", key)
                continue
            if key.startswith("x-"):
                paths[key] = PathExtension(value)
                continue
            paths[key] = self._parse_path_item(value, f"#/paths/{key}")
        return paths

    def _parse_path_item(self, data: Any, path: str) -> PathItem:
        self._expect_mapping(data, path)
        operations = {}
        for method in HTTP_METHODS:
            if data.get(method) is not None:
                operations[method] = self._parse_operation(data[method], f"{path}/{method}")
        return PathItem(**operations)

    def _parse_operation(self, data: Any, path: str) -> Operation:
        self._expect_mapping(data, path)
        parameters = ()
        if data.get("parameters") is not None:
            raw = self._expect_list(data["parameters"], f"{path}/parameters")
            parameters = tuple(self._parse_parameter(param, f"{path}/parameters/{i}") for i, param in enumerate(raw))

        responses = {}
        if data.get("responses") is not None:
            responses = self._parse_responses(data["responses"], f"{path}/responses")

        return Operation(
            operation_id=self._optional_str(data, "operationId", path),
            parameters=parameters,
            responses=responses,
        )

    def _parse_parameter(self, data: Any, path: str) -> Parameter:
        self._expect_mapping(data, path)
        if "$ref" in data:
            # Shared parameter definitions never carry body models we need
            logger.debug("skipping parameter reference %s at %s", data["$ref"], path)
            return Parameter(name=str(data["$ref"]), location="ref")

        location = data.get("in")
        if not isinstance(location, str):
            raise DocumentError("expected `in` field for parameter", path)
        name = data.get("name")
        if not isinstance(name, str):
            raise DocumentError("expected `name` field for parameter", path)

        schema = None
        if location == "body":
            if data.get("schema") is None:
                raise DocumentError("body parameter without schema", path)
            schema = self.parse_schema(data["schema"], f"{path}/schema")

        return Parameter(name=name, location=location, schema=schema)

    def _optional_str(self, data: dict, key: str, path: str) -> str | None:
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise DocumentError(f"expected string for `{key}`, got {type(value).__name__}", path)
        return value

    def _expect_mapping(self, data: Any, path: str) -> dict:
        if not isinstance(data, dict):
            raise DocumentError(f"expected mapping, got {type(data).__name__}", path)
        return data

    def _expect_list(self, data: Any, path: str) -> list:
        if not isinstance(data, list):
            raise DocumentError(f"expected list, got {type(data).__name__}", path)
        return data


def parse_document(data: Any) -> Document:
    """Parse a loaded Swagger v2 document."""
    return DocumentParser().parse(data)
