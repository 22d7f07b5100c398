"""Selection-set resolution for operation return types.

Walks a field's return type through the type catalog and produces a tree
of selected field names: leaf names as strings, object fields as
``{fieldName: [children]}``.
"""

from typing import Iterable

from .errors import UnknownKindError
from .ir import (
    ListType,
    NamedType,
    NonNullType,
    SelectionNode,
    TypeCatalog,
    TypeKind,
    TypeRef,
)
from .type_chain import leaf_type

# Only object-field descent counts toward the depth; unwrapping NON_NULL/LIST is free.
MAX_SELECTION_DEPTH = 8


def resolve_selection(
    type_ref: TypeRef,
    catalog: TypeCatalog,
    current_name: str = "",
    level: int = 0,
    result: Iterable[SelectionNode] = (),
) -> list[SelectionNode]:
    """Resolve the selection set for a field of the given type.

    Args:
        type_ref: The field's (possibly wrapped) return type
        catalog: Type catalog used to look up object fields
        current_name: Name of the field being resolved; ``""`` for the root
        level: Object nesting depth; 0 for the root operation field
        result: Entries accumulated so far

    Returns:
        The accumulated entries followed by this field's entries. At level 0
        an object's children are spliced in directly, deeper objects are
        nested under their field name.
    """
    result = list(result)

    if level > MAX_SELECTION_DEPTH or leaf_type(type_ref).kind is TypeKind.UNION:
        return result

    if isinstance(type_ref, (NonNullType, ListType)):
        return resolve_selection(type_ref.of_type, catalog, current_name, level, result)

    if isinstance(type_ref, NamedType):
        if type_ref.kind in (TypeKind.SCALAR, TypeKind.ENUM):
            return result + [current_name]

        if type_ref.kind is TypeKind.OBJECT:
            entry = catalog.get(type_ref.name)
            children: list[SelectionNode] = []
            for sub_field in entry.fields if entry else []:
                children.extend(
                    resolve_selection(sub_field.type, catalog, sub_field.name, level + 1)
                )
            if level == 0:
                return result + children
            return result + [{current_name: children}]

    raise UnknownKindError(
        getattr(type_ref.kind, "value", None), getattr(type_ref, "name", None)
    )
