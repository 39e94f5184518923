"""
Python code generation backend.

Generates dataclasses-json records, `str` enums and type aliases.
"""

from __future__ import annotations

import keyword
from typing import Any

from ...utils import to_upper_snake_case
from ..analyzer.ir_nodes import FieldDef, TypeKind, TypeRef
from ..schema_model.nodes import Document
from .base import CodeBackend

# Names bound by the generated prefix; a field with one of these names would
# shadow it when annotations are evaluated in the class namespace
PRELUDE_NAMES = frozenset(
    {
        "Any",
        "Enum",
        "TypeAlias",
        "bool",
        "config",
        "dataclass",
        "dataclass_json",
        "datetime",
        "dict",
        "field",
        "float",
        "int",
        "list",
        "str",
    }
)

PYTHON_KEYWORDS = frozenset(keyword.kwlist) | frozenset(keyword.softkwlist) | PRELUDE_NAMES


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    LANGUAGE = "python"
    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"
    COMMENT_PREFIX = "#"
    KEYWORDS = PYTHON_KEYWORDS

    TYPE_MAP = {
        TypeKind.I8: "int",
        TypeKind.U8: "int",
        TypeKind.I16: "int",
        TypeKind.U16: "int",
        TypeKind.I32: "int",
        TypeKind.U32: "int",
        TypeKind.I64: "int",
        TypeKind.U64: "int",
        TypeKind.ISIZE: "int",
        TypeKind.USIZE: "int",
        TypeKind.F32: "float",
        TypeKind.F64: "float",
        TypeKind.BOOL: "bool",
        TypeKind.STRING: "str",
        TypeKind.DATE_TIME: "datetime",
        TypeKind.UNTYPED: "Any",
    }

    def render_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Python type string."""
        # Binary payloads are kept as bytes rather than a list of small ints
        if type_ref.kind == TypeKind.LIST and type_ref.inner is not None and type_ref.inner.kind == TypeKind.U8:
            return "bytes"
        if type_ref.kind in self.TYPE_MAP:
            return self.TYPE_MAP[type_ref.kind]
        if type_ref.kind == TypeKind.NAMED:
            return self.format_type_name(type_ref.name)
        if type_ref.kind == TypeKind.LIST:
            return f"list[{self.render_type(type_ref.inner)}]"
        if type_ref.kind == TypeKind.MAP:
            return f"dict[str, {self.render_type(type_ref.inner)}]"
        if type_ref.kind == TypeKind.NULLABLE:
            return f"{self.render_type(type_ref.inner)} | None"
        return "Any"

    def format_enum_member(self, value: str) -> str:
        """Format an enum literal as an UPPER_SNAKE_CASE member name."""
        name = to_upper_snake_case(value)
        if not name:
            return "EMPTY"
        if name[0].isdigit():
            return f"VALUE_{name}"
        return name

    def generate_helpers(self, document: Document) -> str:
        """Generate the import block and the datetime field codecs."""
        return self.prefix_template.render().rstrip("\n") + "\n\n\n"

    def _order_fields(self, fields: list[FieldDef]) -> list[FieldDef]:
        # Dataclass fields without a default must come first
        required = [f for f in fields if f.is_required]
        optional = [f for f in fields if not f.is_required]
        return required + optional

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        metadata = []
        if field.is_renamed:
            metadata.append(f"field_name={self.quote_string(field.original_name)}")
        if field.type_ref.unwrap_nullable().kind == TypeKind.DATE_TIME:
            metadata.append("encoder=_encode_datetime")
            metadata.append("decoder=_decode_datetime")

        arguments = []
        if not field.is_required:
            arguments.append("default=None")
        if metadata:
            arguments.append(f"metadata=config({', '.join(metadata)})")

        if metadata:
            default = f"field({', '.join(arguments)})"
        elif not field.is_required:
            default = "None"
        else:
            default = None

        return {
            "NAME": field.name,
            "TYPE": self.render_type(field.type_ref),
            "default": default,
            "doc_lines": self._comment_lines(field.description, indent="    "),
        }

    def _render(self, template, **context: Any) -> str:
        # Two blank lines between top-level declarations
        return template.render(**context).rstrip("\n") + "\n\n\n"
