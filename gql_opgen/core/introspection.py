"""Pydantic models for the raw GraphQL introspection document.

These mirror the JSON shape returned by an introspection query closely
enough to validate it; conversion into the generator's own representation
happens in :mod:`gql_opgen.core.ir`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SchemaFetchError


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class IntrospectionTypeRef(_IntrospectionModel):
    """A (possibly wrapped) reference to a named type."""
    kind: str | None = None
    name: str | None = None
    of_type: IntrospectionTypeRef | None = Field(default=None, alias="ofType")


class IntrospectionInputValue(_IntrospectionModel):
    """An argument or an input object field."""
    name: str
    type: IntrospectionTypeRef
    description: str | None = None
    default_value: str | None = Field(default=None, alias="defaultValue")


class IntrospectionField(_IntrospectionModel):
    """A field of an object type."""
    name: str
    type: IntrospectionTypeRef
    args: list[IntrospectionInputValue] = Field(default_factory=list)
    description: str | None = None


class IntrospectionType(_IntrospectionModel):
    """A named entry of the schema's type list."""
    kind: str
    name: str
    description: str | None = None
    fields: list[IntrospectionField] | None = None
    input_fields: list[IntrospectionInputValue] | None = Field(
        default=None, alias="inputFields"
    )


class IntrospectionRootType(_IntrospectionModel):
    name: str


class IntrospectionSchema(_IntrospectionModel):
    types: list[IntrospectionType]
    query_type: IntrospectionRootType | None = Field(default=None, alias="queryType")
    mutation_type: IntrospectionRootType | None = Field(
        default=None, alias="mutationType"
    )
    subscription_type: IntrospectionRootType | None = Field(
        default=None, alias="subscriptionType"
    )


class IntrospectionDocument(_IntrospectionModel):
    """Top level ``{"__schema": {...}}`` document."""
    schema_: IntrospectionSchema = Field(alias="__schema")


def parse_introspection(data: Any, source: str | None = None) -> IntrospectionDocument:
    """Validate decoded JSON as an introspection document.

    Accepts both the bare ``{"__schema": ...}`` form served by schema
    endpoints and the ``{"data": {"__schema": ...}}`` envelope returned when
    the introspection query is executed.

    Raises:
        SchemaFetchError: If the payload is not a valid introspection document.
    """
    if isinstance(data, dict) and "__schema" not in data and "data" in data:
        if data.get("errors"):
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e)
                for e in data["errors"]
            )
            raise SchemaFetchError(f"Introspection errors: {messages}", source)
        data = data["data"]

    try:
        return IntrospectionDocument.model_validate(data)
    except ValidationError as e:
        raise SchemaFetchError(f"Malformed introspection document: {e}", source) from e
