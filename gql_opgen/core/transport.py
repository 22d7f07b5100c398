"""Transport protocol used by generated SDK wrappers.

Generated wrapper methods forward each operation document to one of these
calls. How the document travels (HTTP, WebSocket, ...) is up to the
implementation; nothing in this package provides one.

Example:
    class HttpxTransport:
        def __init__(self, url: str, client: httpx.AsyncClient):
            self.url = url
            self.client = client

        async def query(self, document, variables=None):
            response = await self.client.post(
                self.url, json={"query": document, "variables": variables or {}}
            )
            return response.json()["data"]

        mutation = query

        async def subscribe(self, document, variables, sink):
            raise NotImplementedError
"""

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Protocol for executing generated operation documents."""

    async def query(self, document: str, variables: dict[str, Any] | None = None) -> Any:
        """Execute a query document and return its data."""
        ...

    async def mutation(self, document: str, variables: dict[str, Any] | None = None) -> Any:
        """Execute a mutation document and return its data."""
        ...

    async def subscribe(
        self,
        document: str,
        variables: dict[str, Any] | None,
        sink: Callable[[Any], Any],
    ) -> Any:
        """Start a subscription, delivering each result to ``sink``."""
        ...
