"""
Analyzer module.

Contains reference resolution, allOf merging, prototype collection and type mapping.
"""

from __future__ import annotations

from .composition import merge_all_of
from .ir_nodes import EnumMember, FieldDef, TypeKind, TypeRef
from .prototyper import ModelPrototype, Prototyper, generate_prototypes
from .reference_resolver import MAX_REFERENCE_DEPTH, ReferenceResolver
from .type_resolver import TypeResolver

__all__ = [
    "EnumMember",
    "FieldDef",
    "MAX_REFERENCE_DEPTH",
    "ModelPrototype",
    "Prototyper",
    "ReferenceResolver",
    "TypeKind",
    "TypeRef",
    "TypeResolver",
    "generate_prototypes",
    "merge_all_of",
]
