"""Intermediate Representation (IR) for introspected GraphQL schemas.

This module defines the generator's own view of a schema: a tagged union
for type references (a chain of NON_NULL/LIST wrappers around one named
leaf), field and argument records, and a name-indexed type catalog built
once from the fetched introspection document.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .errors import UnknownKindError
from .introspection import (
    IntrospectionDocument,
    IntrospectionInputValue,
    IntrospectionType,
    IntrospectionTypeRef,
    parse_introspection,
)


class TypeKind(Enum):
    """Kinds the resolver understands."""
    NON_NULL = "NON_NULL"
    LIST = "LIST"
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INPUT_OBJECT = "INPUT_OBJECT"
    ENUM = "ENUM"
    UNION = "UNION"


WRAPPER_KINDS = frozenset({TypeKind.NON_NULL, TypeKind.LIST})


@dataclass(frozen=True)
class NamedType:
    """A leaf of a type chain: SCALAR, OBJECT, INPUT_OBJECT, ENUM or UNION."""
    kind: TypeKind
    name: str

    def __post_init__(self):
        if self.kind in WRAPPER_KINDS:
            raise UnknownKindError(self.kind.value, self.name)


@dataclass(frozen=True)
class NonNullType:
    of_type: "TypeRef"

    kind = TypeKind.NON_NULL


@dataclass(frozen=True)
class ListType:
    of_type: "TypeRef"

    kind = TypeKind.LIST


TypeRef = Union[NamedType, NonNullType, ListType]

# A selected leaf field name, or {fieldName: [children]} for an object field
SelectionNode = Union[str, dict[str, list[Any]]]

# Flattened summary of an argument's type chain: type, value, list, required
VariableDescriptor = dict[str, Any]


@dataclass
class ArgSpec:
    """Represents an argument of a field (or a field of an input object)."""
    name: str
    type: TypeRef


@dataclass
class FieldSpec:
    """Represents a field of an object type or of a root operation type."""
    name: str
    type: TypeRef
    args: list[ArgSpec] = field(default_factory=list)


@dataclass
class TypeCatalogEntry:
    """A named schema type with its fields or input fields."""
    name: str
    kind: str
    fields: list[FieldSpec] = field(default_factory=list)
    input_fields: list[ArgSpec] = field(default_factory=list)


@dataclass
class RootOperation:
    """A field of the Query, Mutation or Subscription root type."""
    operation_type: str  # 'query', 'mutation' or 'subscription'
    field: FieldSpec


# operation keyword -> default root type name
ROOT_OPERATION_TYPES = {
    "query": "Query",
    "mutation": "Mutation",
    "subscription": "Subscription",
}


def parse_kind(kind: str | None, name: str | None = None) -> TypeKind:
    """Map an introspection kind string onto TypeKind."""
    try:
        return TypeKind(kind)
    except ValueError:
        raise UnknownKindError(kind, name) from None


def to_type_ref(raw: IntrospectionTypeRef) -> TypeRef:
    """Convert a raw introspection type reference into a TypeRef chain."""
    kind = parse_kind(raw.kind, raw.name)

    if kind in WRAPPER_KINDS:
        if raw.of_type is None:
            raise UnknownKindError(raw.kind, raw.name)
        inner = to_type_ref(raw.of_type)
        if kind is TypeKind.NON_NULL:
            return NonNullType(inner)
        return ListType(inner)

    if not raw.name:
        raise UnknownKindError(raw.kind, raw.name)
    return NamedType(kind, raw.name)


def type_ref_from_dict(data: dict[str, Any]) -> TypeRef:
    """Build a TypeRef from a plain ``{"kind", "name", "ofType"}`` dict."""
    return to_type_ref(IntrospectionTypeRef.model_validate(data))


def _to_arg_specs(values: list[IntrospectionInputValue] | None) -> list[ArgSpec]:
    return [ArgSpec(name=v.name, type=to_type_ref(v.type)) for v in values or []]


def _to_entry(raw: IntrospectionType) -> TypeCatalogEntry:
    fields = [
        FieldSpec(name=f.name, type=to_type_ref(f.type), args=_to_arg_specs(f.args))
        for f in raw.fields or []
    ]
    return TypeCatalogEntry(
        name=raw.name,
        kind=raw.kind,
        fields=fields,
        input_fields=_to_arg_specs(raw.input_fields),
    )


class TypeCatalog:
    """Name-indexed view of every type in an introspection document.

    Raw entries are converted on first lookup and cached, so a type is only
    resolved once the generator actually reaches it. The catalog is
    read-only after construction.
    """

    def __init__(self, document: IntrospectionDocument):
        schema = document.schema_
        self._raw: dict[str, IntrospectionType] = {t.name: t for t in schema.types}
        self._entries: dict[str, TypeCatalogEntry] = {}

        declared = {
            "query": schema.query_type,
            "mutation": schema.mutation_type,
            "subscription": schema.subscription_type,
        }
        self.root_type_names: dict[str, str] = {
            op_type: declared[op_type].name if declared[op_type] else default
            for op_type, default in ROOT_OPERATION_TYPES.items()
        }

    @classmethod
    def from_dict(cls, data: Any, source: str | None = None) -> "TypeCatalog":
        """Build a catalog from decoded introspection JSON."""
        return cls(parse_introspection(data, source))

    def __contains__(self, name: str) -> bool:
        return name in self._raw

    def __len__(self) -> int:
        return len(self._raw)

    @property
    def type_names(self) -> list[str]:
        return list(self._raw)

    def get(self, name: str) -> TypeCatalogEntry | None:
        """Look up a type by name."""
        if name not in self._entries:
            raw = self._raw.get(name)
            if raw is None:
                return None
            self._entries[name] = _to_entry(raw)
        return self._entries[name]

    def root_operations(self, operation_type: str) -> list[RootOperation]:
        """Return the fields of one root type, in declaration order."""
        entry = self.get(self.root_type_names[operation_type])
        if entry is None:
            return []
        return [RootOperation(operation_type, f) for f in entry.fields]

    @property
    def all_operations(self) -> list[RootOperation]:
        """Return queries, then mutations, then subscriptions."""
        operations = []
        for op_type in ROOT_OPERATION_TYPES:
            operations.extend(self.root_operations(op_type))
        return operations
