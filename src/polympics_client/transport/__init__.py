"""Transport layer components for the Polympics client.

Transport layers wrap an httpx transport (``httpx.AsyncHTTPTransport`` in
production, ``httpx.MockTransport`` in tests). This is the injection point
for the network: the client never opens sockets itself.

Modules:
    error_logging: Error logging wrapper and the transport stack factory

Example:
    ```python
    from polympics_client.transport import create_transport_stack

    transport = create_transport_stack(enable_error_logging=True)
    ```
"""

from polympics_client.transport.error_logging import ErrorLoggingTransport, create_transport_stack

__all__ = ["ErrorLoggingTransport", "create_transport_stack"]
