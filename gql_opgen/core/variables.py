"""Variable descriptors for operation arguments.

A descriptor is a flat summary of an argument's type chain::

    {"type": "Foo!", "list": True, "required": True}

Nested list/non-null wrappers collapse into the two boolean flags, so a
list of lists is indistinguishable from a single list.
"""

from .errors import UnknownKindError
from .ir import ArgSpec, ListType, NamedType, NonNullType, TypeKind, TypeRef, VariableDescriptor

# Kinds that can name an argument's type
ARGUMENT_LEAF_KINDS = frozenset({
    TypeKind.SCALAR,
    TypeKind.OBJECT,
    TypeKind.ENUM,
    TypeKind.INPUT_OBJECT,
})


def _is_argument_leaf(type_ref: TypeRef) -> bool:
    return isinstance(type_ref, NamedType) and type_ref.kind in ARGUMENT_LEAF_KINDS


def resolve_arg_descriptor(
    type_ref: TypeRef,
    result: VariableDescriptor | None = None,
) -> VariableDescriptor:
    """Resolve an argument's type chain into a variable descriptor.

    Raises:
        UnknownKindError: If the chain ends in a kind arguments cannot use.
    """
    result = dict(result or {})

    if isinstance(type_ref, NonNullType) and _is_argument_leaf(type_ref.of_type):
        return {**result, "type": f"{type_ref.of_type.name}!"}

    if _is_argument_leaf(type_ref):
        return {**result, "type": type_ref.name, "value": None}

    if isinstance(type_ref, ListType):
        return resolve_arg_descriptor(type_ref.of_type, {**result, "list": True})

    if isinstance(type_ref, NonNullType):
        return resolve_arg_descriptor(type_ref.of_type, {**result, "required": True})

    raise UnknownKindError(
        getattr(type_ref.kind, "value", None), getattr(type_ref, "name", None)
    )


def parse_variables(args: list[ArgSpec]) -> dict[str, VariableDescriptor]:
    """Map each argument name to its descriptor, in declaration order."""
    return {arg.name: resolve_arg_descriptor(arg.type) for arg in args}


def descriptor_type_string(descriptor: VariableDescriptor) -> str:
    """Render the declared type of a variable from its descriptor."""
    type_str = descriptor["type"]
    if descriptor.get("list"):
        type_str = f"[{type_str}]"
    if descriptor.get("required"):
        type_str = f"{type_str}!"
    return type_str
