"""
Schema model module.

Contains the immutable document model and the parser building it.
"""

from __future__ import annotations

from .nodes import (
    DEFINITIONS_REF,
    HTTP_METHODS,
    RESPONSES_REF,
    Document,
    Item,
    Operation,
    Parameter,
    PathExtension,
    PathItem,
    Reference,
    Response,
    SchemaNode,
    trim_reference,
)
from .parser import DocumentParser, parse_document

__all__ = [
    "DEFINITIONS_REF",
    "RESPONSES_REF",
    "HTTP_METHODS",
    "Document",
    "Item",
    "Operation",
    "Parameter",
    "PathExtension",
    "PathItem",
    "Reference",
    "Response",
    "SchemaNode",
    "trim_reference",
    "DocumentParser",
    "parse_document",
]
