"""
Schema model for Swagger v2 documents.

These nodes represent an already parsed document. They are immutable:
the document is shared by reference through a whole generation run and
never modified after parsing.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union

DEFINITIONS_REF = "#/definitions/"
RESPONSES_REF = "#/responses/"

# Order in which operations of a path item are visited
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


def trim_reference(ref: str) -> str:
    """Strip the definitions/responses namespace prefix from a reference."""
    if ref.startswith(DEFINITIONS_REF):
        return ref[len(DEFINITIONS_REF) :]
    if ref.startswith(RESPONSES_REF):
        return ref[len(RESPONSES_REF) :]
    return ref


@dataclass(frozen=True)
class Reference:
    """A bare `$ref` used as a property value, array item or map value."""

    ref: str = ""


@dataclass(frozen=True)
class SchemaNode:
    """One node of the document's type grammar."""

    ref: str | None = None
    format: str | None = None
    title: str | None = None
    description: str | None = None
    required: tuple[str, ...] = ()
    type: str | None = None
    items: Item | None = None
    properties: dict[str, Item] | None = None
    additional_properties: Item | None = None
    enum: tuple[Any, ...] = ()
    all_of: tuple[SchemaNode, ...] = ()

    # Vendor extensions (naming hints only)
    x_go_name: str | None = None

    def name(self) -> str | None:
        """Declared name of the schema: vendor name first, then title."""
        return self.x_go_name or self.title

    def is_object(self) -> bool:
        return self.type == "object"

    def is_array(self) -> bool:
        return self.type == "array"

    def is_enum(self) -> bool:
        return bool(self.enum)

    def is_string_enum(self) -> bool:
        return self.type == "string" and bool(self.enum)

    def has_properties(self) -> bool:
        return self.properties is not None


# Property values, array items and additional properties are either a bare
# reference or an inline schema
Item = Union[Reference, SchemaNode]


@dataclass(frozen=True)
class Response:
    """A response: either an alias to another response (`$ref`) or a description + optional schema."""

    ref: str | None = None
    description: str | None = None
    schema: SchemaNode | None = None

    def is_reference(self) -> bool:
        return self.ref is not None


@dataclass(frozen=True)
class Parameter:
    """An operation parameter. Only body parameters carry a schema."""

    name: str = ""
    location: str = ""  # "body", "query", "path", "header" or "formData"
    schema: SchemaNode | None = None

    def is_body(self) -> bool:
        return self.location == "body"


@dataclass(frozen=True)
class Operation:
    """One HTTP operation of a path item."""

    operation_id: str | None = None
    parameters: tuple[Parameter, ...] = ()
    responses: dict[str, Response] = field(default_factory=dict)


@dataclass(frozen=True)
class PathItem:
    """A path item exposing up to seven HTTP operations."""

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield (method, operation) pairs in the fixed HTTP method order."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


@dataclass(frozen=True)
class PathExtension:
    """A vendor extension (`x-*`) entry found among the paths."""

    value: Any = None


@dataclass(frozen=True)
class Document:
    """Root of a parsed Swagger v2 document."""

    swagger: str = "2.0"
    definitions: dict[str, SchemaNode] | None = None
    responses: dict[str, Response] | None = None
    paths: dict[str, PathItem | PathExtension] | None = None
