"""Error logging transport for the Polympics client.

Wraps another httpx transport and logs every exchange. It does not retry,
alter or swallow anything: responses are returned unchanged and transport
exceptions are re-raised after being logged.

```python
from polympics_client.transport.error_logging import ErrorLoggingTransport
import httpx

transport = ErrorLoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("http://127.0.0.1:8000/accounts/signups")
```
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class ErrorLoggingTransport(httpx.AsyncBaseTransport):
    """Transport that logs requests, server errors and network failures.

    Args:
        wrapped_transport: The underlying transport to wrap
    """

    def __init__(self, *, wrapped_transport: httpx.AsyncBaseTransport) -> None:
        self._wrapped_transport = wrapped_transport

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request through the wrapped transport and log the result."""
        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except Exception as e:
            logger.warning(f"Request {request.method} {request.url} failed: {e!r}")
            raise

        if response.status_code >= 500:
            logger.warning(f"Request {request.method} {request.url} returned {response.status_code}")
        else:
            logger.debug(f"Request {request.method} {request.url} returned {response.status_code}")
        return response


def create_transport_stack(
    *,
    wrapped_transport: httpx.AsyncBaseTransport | None = None,
    enable_error_logging: bool = True,
) -> httpx.AsyncBaseTransport:
    """Build the transport used by ``PolympicsClient``.

    Args:
        wrapped_transport: Innermost transport; defaults to a plain
            ``httpx.AsyncHTTPTransport``. Tests pass ``httpx.MockTransport``.
        enable_error_logging: Wrap the transport in ErrorLoggingTransport.
    """
    transport = wrapped_transport if wrapped_transport is not None else httpx.AsyncHTTPTransport()
    if enable_error_logging:
        transport = ErrorLoggingTransport(wrapped_transport=transport)
    return transport
