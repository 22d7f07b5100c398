"""Schema fetcher.

Retrieves the introspection document that drives generation, either from a
live endpoint over HTTP or from a local file (introspection JSON or SDL).
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
from graphql import GraphQLError, build_schema, get_introspection_query, introspection_from_schema

from .errors import SchemaFetchError
from .ir import TypeCatalog

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


async def fetch_schema(
    url: str,
    *,
    method: str = "GET",
    headers: dict[str, str] | None = None,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TypeCatalog:
    """Fetch the introspection document from a schema endpoint.

    Args:
        url: Schema endpoint URL
        method: "GET" for endpoints serving the introspection JSON directly,
                "POST" to execute the standard introspection query
        headers: Extra request headers
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used by tests)

    Returns:
        The type catalog built from the fetched document

    Raises:
        SchemaFetchError: On transport failure, an error status, a non-JSON
                          body, or a malformed introspection document
    """
    method = method.upper()
    if method not in ("GET", "POST"):
        raise ValueError(f"Unsupported method: {method}")

    logger.info("Fetching schema from %s (%s)", url, method)
    async with httpx.AsyncClient(
        timeout=timeout, headers=headers or {}, transport=transport
    ) as client:
        try:
            if method == "GET":
                response = await client.get(url)
            else:
                response = await client.post(url, json={"query": get_introspection_query()})
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SchemaFetchError(f"Failed to fetch schema: {e}", url) from e

    try:
        data = response.json()
    except ValueError as e:
        raise SchemaFetchError(f"Schema response is not valid JSON: {e}", url) from e

    catalog = TypeCatalog.from_dict(data, url)
    logger.info("Fetched %d types", len(catalog))
    return catalog


def load_schema_file(path: str) -> TypeCatalog:
    """Load an introspection JSON file or an SDL schema file.

    SDL files are converted to an introspection document with graphql-core,
    so both sources produce the same catalog.
    """
    schema_path = Path(path)
    try:
        content = schema_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaFetchError(f"Failed to read schema: {e}", path) from e

    data: Any
    if schema_path.suffix.lower() in SDL_SUFFIXES:
        try:
            data = introspection_from_schema(build_schema(content))
        except (GraphQLError, TypeError) as e:
            raise SchemaFetchError(f"Invalid SDL schema: {e}", path) from e
    else:
        try:
            data = json.loads(content)
        except ValueError as e:
            raise SchemaFetchError(f"Schema file is not valid JSON: {e}", path) from e

    catalog = TypeCatalog.from_dict(data, path)
    logger.info("Loaded %d types from %s", len(catalog), path)
    return catalog
