"""Shared fixtures: a small introspection document in the standard JSON shape."""

import pytest

from gql_opgen.core.ir import TypeCatalog


def named(kind, name):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


def field(name, type_ref, args=()):
    return {"name": name, "description": None, "args": list(args), "type": type_ref}


def arg(name, type_ref):
    return {"name": name, "description": None, "type": type_ref, "defaultValue": None}


def object_type(name, fields, kind="OBJECT"):
    return {"kind": kind, "name": name, "fields": fields, "inputFields": None}


@pytest.fixture
def token_schema():
    """Query/Mutation/Subscription roots over Token and Network objects."""
    types = [
        object_type("Query", [
            field("token", named("OBJECT", "Token"), [
                arg("input", non_null(named("INPUT_OBJECT", "TokenInput"))),
            ]),
            field("tokens", list_of(named("OBJECT", "Token")), [
                arg("ids", non_null(list_of(non_null(named("SCALAR", "String"))))),
            ]),
            field("apiVersion", named("SCALAR", "String")),
            field("search", named("UNION", "SearchResult"), [
                arg("q", named("SCALAR", "String")),
            ]),
        ]),
        object_type("Mutation", [
            field("deleteApiToken", non_null(named("SCALAR", "String")), [
                arg("id", non_null(named("SCALAR", "String"))),
            ]),
        ]),
        object_type("Subscription", [
            field("onTokenUpdated", named("OBJECT", "Token"), [
                arg("address", named("SCALAR", "String")),
            ]),
        ]),
        object_type("Token", [
            field("id", non_null(named("SCALAR", "ID"))),
            field("name", named("SCALAR", "String")),
            field("network", named("OBJECT", "Network")),
        ]),
        object_type("Network", [
            field("id", non_null(named("SCALAR", "Int"))),
            field("name", named("SCALAR", "String")),
        ]),
        {
            "kind": "INPUT_OBJECT",
            "name": "TokenInput",
            "fields": None,
            "inputFields": [
                arg("address", non_null(named("SCALAR", "String"))),
                arg("networkId", non_null(named("SCALAR", "Int"))),
            ],
        },
        {"kind": "UNION", "name": "SearchResult", "fields": None, "possibleTypes": []},
        # Never reached from a root field
        object_type("Entity", [field("id", named("SCALAR", "ID"))], kind="INTERFACE"),
        {"kind": "SCALAR", "name": "ID"},
        {"kind": "SCALAR", "name": "String"},
        {"kind": "SCALAR", "name": "Int"},
    ]
    return {
        "__schema": {
            "queryType": {"name": "Query"},
            "mutationType": {"name": "Mutation"},
            "subscriptionType": {"name": "Subscription"},
            "types": types,
        }
    }


@pytest.fixture
def token_catalog(token_schema):
    return TypeCatalog.from_dict(token_schema)


@pytest.fixture
def self_referential_schema():
    """A Node type whose parent field points back at Node."""
    return {
        "__schema": {
            "types": [
                object_type("Query", [field("node", named("OBJECT", "Node"))]),
                object_type("Node", [
                    field("id", non_null(named("SCALAR", "ID"))),
                    field("parent", named("OBJECT", "Node")),
                ]),
                {"kind": "SCALAR", "name": "ID"},
            ]
        }
    }
