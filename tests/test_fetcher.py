"""Tests for the schema fetcher."""

import asyncio
import json

import httpx
import pytest

from gql_opgen.core.errors import SchemaFetchError
from gql_opgen.core.fetcher import fetch_schema, load_schema_file

SCHEMA_URL = "https://graph.example.com/schema/latest.json"


def fetch(handler, **kwargs):
    return asyncio.run(fetch_schema(SCHEMA_URL, transport=httpx.MockTransport(handler), **kwargs))


class TestFetchSchema:
    """Tests for fetch_schema."""

    def test_get_introspection_document(self, token_schema):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert str(request.url) == SCHEMA_URL
            return httpx.Response(200, json=token_schema, request=request)

        catalog = fetch(handler)
        assert "Token" in catalog
        assert len(catalog.root_operations("query")) == 4

    def test_post_sends_introspection_query(self, token_schema):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            payload = json.loads(request.content.decode("utf-8"))
            assert "__schema" in payload["query"]
            return httpx.Response(200, json={"data": token_schema}, request=request)

        catalog = fetch(handler, method="post")
        assert "Network" in catalog

    def test_sends_extra_headers(self, token_schema):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"] == "api-key"
            return httpx.Response(200, json=token_schema, request=request)

        fetch(handler, headers={"Authorization": "api-key"})

    def test_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable", request=request)

        with pytest.raises(SchemaFetchError) as exc_info:
            fetch(handler)
        assert exc_info.value.source == SCHEMA_URL

    def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SchemaFetchError):
            fetch(handler)

    def test_body_is_not_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>", request=request)

        with pytest.raises(SchemaFetchError):
            fetch(handler)

    def test_malformed_document(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"__schema": {"types": "nope"}}, request=request)

        with pytest.raises(SchemaFetchError):
            fetch(handler)

    def test_unsupported_method(self):
        with pytest.raises(ValueError):
            asyncio.run(fetch_schema(SCHEMA_URL, method="PUT"))

    def test_malformed_url(self):
        with pytest.raises(SchemaFetchError) as exc_info:
            asyncio.run(fetch_schema("http://[::1"))
        assert exc_info.value.source == "http://[::1"


class TestLoadSchemaFile:
    """Tests for load_schema_file."""

    def test_introspection_json(self, token_schema, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(token_schema), encoding="utf-8")

        catalog = load_schema_file(str(path))
        assert [f.name for f in catalog.get("Network").fields] == ["id", "name"]

    def test_sdl(self, tmp_path):
        path = tmp_path / "schema.graphqls"
        path.write_text(
            "type Query {\n"
            "  token(input: TokenInput!): Token\n"
            "}\n"
            "input TokenInput { address: String! }\n"
            "type Token { id: ID!, name: String }\n",
            encoding="utf-8",
        )

        catalog = load_schema_file(str(path))
        token = catalog.root_operations("query")[0].field
        assert token.name == "token"
        assert [f.name for f in catalog.get("Token").fields] == ["id", "name"]

    def test_invalid_sdl(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query {", encoding="utf-8")

        with pytest.raises(SchemaFetchError):
            load_schema_file(str(path))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SchemaFetchError):
            load_schema_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaFetchError):
            load_schema_file(str(tmp_path / "missing.json"))
