"""
IR (Intermediate Representation) node definitions.

These nodes represent the language-independent target type of a schema
node. Backends translate them into concrete type expressions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    I8 = "i8"
    U8 = "u8"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    ISIZE = "isize"  # Pointer-sized signed integer
    USIZE = "usize"  # Pointer-sized unsigned integer
    F32 = "f32"
    F64 = "f64"
    BOOL = "bool"
    STRING = "string"
    DATE_TIME = "date_time"
    LIST = "list"  # list[T]
    MAP = "map"  # dict[str, T]
    NULLABLE = "nullable"  # T | None
    NAMED = "named"  # A generated declaration
    UNTYPED = "untyped"  # Arbitrary JSON value


INTEGER_FORMATS = {
    "int": TypeKind.ISIZE,
    "uint": TypeKind.USIZE,
    "int64": TypeKind.I64,
    "uint64": TypeKind.U64,
    "int32": TypeKind.I32,
    "uint32": TypeKind.U32,
    "int16": TypeKind.I16,
    "uint16": TypeKind.U16,
    "int8": TypeKind.I8,
    "uint8": TypeKind.U8,
}


@dataclass(frozen=True)
class TypeRef:
    """A resolved target type."""

    kind: TypeKind = TypeKind.UNTYPED
    name: str = ""  # Declaration name for NAMED types

    # Element type for LIST, value type for MAP, wrapped type for NULLABLE
    type_args: tuple[TypeRef, ...] = ()

    @staticmethod
    def primitive(kind: TypeKind) -> TypeRef:
        return TypeRef(kind=kind)

    @staticmethod
    def list_of(item: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.LIST, type_args=(item,))

    @staticmethod
    def map_of(value: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.MAP, type_args=(value,))

    @staticmethod
    def named(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.NAMED, name=name)

    @staticmethod
    def untyped() -> TypeRef:
        return TypeRef(kind=TypeKind.UNTYPED)

    @staticmethod
    def nullable(inner: TypeRef) -> TypeRef:
        """Wrap a type as nullable. Nullable types are never wrapped twice."""
        if inner.kind == TypeKind.NULLABLE:
            return inner
        return TypeRef(kind=TypeKind.NULLABLE, type_args=(inner,))

    @property
    def inner(self) -> TypeRef | None:
        """The single type argument of LIST, MAP and NULLABLE types."""
        return self.type_args[0] if self.type_args else None

    @property
    def is_nullable(self) -> bool:
        return self.kind == TypeKind.NULLABLE

    def unwrap_nullable(self) -> TypeRef:
        """Return the wrapped type of a nullable, or the type itself."""
        if self.kind == TypeKind.NULLABLE:
            return self.type_args[0]
        return self


@dataclass(frozen=True)
class FieldDef:
    """A field of a generated record."""

    name: str = ""  # Formatted identifier
    original_name: str = ""  # Property name on the wire
    type_ref: TypeRef | None = None
    is_required: bool = False
    description: str | None = None

    @property
    def is_renamed(self) -> bool:
        return self.name != self.original_name


@dataclass(frozen=True)
class EnumMember:
    """One case of a generated string enumeration."""

    name: str = ""  # Formatted case name
    value: str = ""  # Literal on the wire
