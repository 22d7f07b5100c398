"""Core modules for GraphQL operation document generation."""

from .document_builder import DocumentBuilder, capitalize, operation_identifier
from .emitter import EmitResult, OperationEmitter
from .errors import (
    FileWriteError,
    GenerationError,
    SchemaFetchError,
    UnknownKindError,
)
from .fetcher import fetch_schema, load_schema_file
from .hooks import (
    AddHeaderHook,
    FilterFieldsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    ArgSpec,
    FieldSpec,
    ListType,
    NamedType,
    NonNullType,
    RootOperation,
    TypeCatalog,
    TypeCatalogEntry,
    TypeKind,
    TypeRef,
    type_ref_from_dict,
)
from .sdk_generator import SdkGenerator
from .selection import MAX_SELECTION_DEPTH, resolve_selection
from .transport import Transport
from .type_chain import leaf_type, render_args, render_type_signature
from .variables import descriptor_type_string, parse_variables, resolve_arg_descriptor

__all__ = [
    # Errors
    "GenerationError",
    "SchemaFetchError",
    "UnknownKindError",
    "FileWriteError",
    # IR types
    "ArgSpec",
    "FieldSpec",
    "ListType",
    "NamedType",
    "NonNullType",
    "RootOperation",
    "TypeCatalog",
    "TypeCatalogEntry",
    "TypeKind",
    "TypeRef",
    "type_ref_from_dict",
    # Fetcher
    "fetch_schema",
    "load_schema_file",
    # Resolvers
    "render_type_signature",
    "render_args",
    "leaf_type",
    "resolve_arg_descriptor",
    "parse_variables",
    "descriptor_type_string",
    "resolve_selection",
    "MAX_SELECTION_DEPTH",
    # Documents
    "DocumentBuilder",
    "capitalize",
    "operation_identifier",
    "OperationEmitter",
    "EmitResult",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterFieldsHook",
    "HookRunner",
    # SDK
    "SdkGenerator",
    "Transport",
]
