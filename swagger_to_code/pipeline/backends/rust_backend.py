"""
Rust code generation backend.

Generates serde-compatible structs, string enums and type aliases.
"""

from __future__ import annotations

from typing import Any

from ...utils import escape_keyword, snake_to_pascal_case
from ..analyzer.ir_nodes import FieldDef, TypeKind, TypeRef
from ..schema_model.nodes import Document
from .base import CodeBackend

RUST_KEYWORDS = frozenset(
    {
        "as",
        "async",
        "await",
        "break",
        "const",
        "continue",
        "crate",
        "dyn",
        "else",
        "enum",
        "extern",
        "false",
        "fn",
        "for",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "match",
        "mod",
        "move",
        "mut",
        "pub",
        "ref",
        "return",
        "self",
        "Self",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "type",
        "unsafe",
        "use",
        "where",
        "while",
    }
)


class RustBackend(CodeBackend):
    """Rust code generation backend."""

    LANGUAGE = "rust"
    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"
    COMMENT_PREFIX = "///"
    KEYWORDS = RUST_KEYWORDS

    TYPE_MAP = {
        TypeKind.I8: "i8",
        TypeKind.U8: "u8",
        TypeKind.I16: "i16",
        TypeKind.U16: "u16",
        TypeKind.I32: "i32",
        TypeKind.U32: "u32",
        TypeKind.I64: "i64",
        TypeKind.U64: "u64",
        TypeKind.ISIZE: "isize",
        TypeKind.USIZE: "usize",
        TypeKind.F32: "f32",
        TypeKind.F64: "f64",
        TypeKind.BOOL: "bool",
        TypeKind.STRING: "String",
        TypeKind.DATE_TIME: "DateTime<Utc>",
        TypeKind.UNTYPED: "Value",
    }

    def generation_comment(self, text: str) -> str:
        # Doc comments are not allowed at the top of a module
        return "".join(f"// {line}\n" for line in text.splitlines()) + "\n"

    def render_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Rust type string."""
        if type_ref.kind in self.TYPE_MAP:
            return self.TYPE_MAP[type_ref.kind]
        if type_ref.kind == TypeKind.NAMED:
            return self.format_type_name(type_ref.name)
        if type_ref.kind == TypeKind.LIST:
            return f"Vec<{self.render_type(type_ref.inner)}>"
        if type_ref.kind == TypeKind.MAP:
            return f"HashMap<String, {self.render_type(type_ref.inner)}>"
        if type_ref.kind == TypeKind.NULLABLE:
            return f"Option<{self.render_type(type_ref.inner)}>"
        return "Value"

    def format_enum_member(self, value: str) -> str:
        """Format an enum literal as an UpperCamel variant name."""
        name = escape_keyword(snake_to_pascal_case(value), self.KEYWORDS)
        if not name:
            return "Empty"
        if name[0].isdigit():
            return f"Value{name}"
        return name

    def generate_helpers(self, document: Document) -> str:
        """Generate the `use` block and the non-optional collection deserializers."""
        return self.prefix_template.render().rstrip("\n") + "\n\n"

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        type_ref = field.type_ref
        attributes = []
        if field.is_renamed:
            attributes.append(f"rename = {self.quote_string(field.original_name)}")

        # Missing or null collections deserialize as empty ones
        if type_ref.kind == TypeKind.LIST:
            attributes.append("default")
            attributes.append('deserialize_with = "deserialize_nonoptional_vec"')
        elif type_ref.kind == TypeKind.MAP:
            attributes.append("default")
            attributes.append('deserialize_with = "deserialize_nonoptional_map"')

        if not field.is_required:
            attributes.append('skip_serializing_if = "Option::is_none"')

        return {
            "NAME": field.name,
            "TYPE": self.render_type(type_ref),
            "attributes": attributes,
            "doc_lines": self._comment_lines(field.description, indent="    "),
        }

    def _render(self, template, **context: Any) -> str:
        context.setdefault("derives", ", ".join(self.config.rust_derives))
        return super()._render(template, **context)
