"""Polympics Client - async Python wrapper for the Polympics API.

This library provides:
- A request pipeline with Basic auth and typed response classification
- Typed domain objects for accounts, teams, awards, sessions and apps
- A cursor paginator for the search endpoints
- Multi-source credential resolution

Example:
    ```python
    from polympics_client import ClientConfig, PolympicsClient

    async with PolympicsClient(ClientConfig.from_env()) as client:
        if await client.accounts.signups_open():
            async for team in client.teams.search(search="lions"):
                print(team.name, team.member_count)
    ```
"""

from polympics_client.auth import Credentials
from polympics_client.client import HttpMethod, PolympicsClient
from polympics_client.config import ClientConfig
from polympics_client.errors import (
    ClientError,
    EmptyResponseError,
    ErrorKind,
    PolympicsError,
    ResponseFormatError,
    ServerError,
    TransportError,
    ValidationError,
)
from polympics_client.paginator import Paginator

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ClientError",
    "Credentials",
    "EmptyResponseError",
    "ErrorKind",
    "HttpMethod",
    "Paginator",
    "PolympicsClient",
    "PolympicsError",
    "ResponseFormatError",
    "ServerError",
    "TransportError",
    "ValidationError",
    "__version__",
]
