"""Helpers that walk a NON_NULL/LIST wrapper chain down to its named leaf."""

from .errors import UnknownKindError
from .ir import ArgSpec, ListType, NamedType, NonNullType, TypeRef


def render_type_signature(type_ref: TypeRef) -> str:
    """Render a type reference as GraphQL type syntax, e.g. ``[Foo!]!``."""
    if isinstance(type_ref, NonNullType):
        return f"{render_type_signature(type_ref.of_type)}!"
    if isinstance(type_ref, ListType):
        return f"[{render_type_signature(type_ref.of_type)}]"
    if isinstance(type_ref, NamedType):
        return type_ref.name
    raise UnknownKindError(getattr(type_ref, "kind", None), getattr(type_ref, "name", None))


def leaf_type(type_ref: TypeRef) -> NamedType:
    """Return the first concrete (non-wrapper) type reached."""
    while isinstance(type_ref, (NonNullType, ListType)):
        type_ref = type_ref.of_type
    if not isinstance(type_ref, NamedType):
        raise UnknownKindError(getattr(type_ref, "kind", None), getattr(type_ref, "name", None))
    return type_ref


def render_args(args: list[ArgSpec]) -> str:
    """Build the argument declaration: ``(token: String!, limit: Int)``.

    Declaration order is preserved; an empty list renders as ``""``.
    """
    if not args:
        return ""
    return "({})".format(
        ", ".join(f"{arg.name}: {render_type_signature(arg.type)}" for arg in args)
    )
