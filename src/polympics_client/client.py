"""The Polympics API client and its request pipeline."""

import enum
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from polympics_client.auth import Credentials
from polympics_client.config import ClientConfig
from polympics_client.endpoints import AccountsAPI, AuthAPI, AwardsAPI, TeamsAPI
from polympics_client.errors import (
    EmptyResponseError,
    EmptySuccess,
    Success,
    TransportError,
    classify_response,
)
from polympics_client.transport import create_transport_stack

logger = logging.getLogger(__name__)


class HttpMethod(str, enum.Enum):
    """HTTP verbs used by the API."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


class PolympicsClient:
    """Client for the Polympics API.

    Endpoints are grouped by resource: ``client.accounts``, ``client.teams``,
    ``client.awards`` and ``client.auth``. Which of them succeed depends on
    the credentials held (none, an app's, or a user session's).

    ``credentials`` is the only state shared between calls. It may be
    reassigned at any time, and the token reset endpoints replace it with
    the new credentials. It is not protected by a lock.

    Args:
        config: Connection settings; defaults to ``ClientConfig()``.
        transport: httpx transport to send requests through. Defaults to the
            stack built by ``create_transport_stack``; tests pass
            ``httpx.MockTransport``.

    Example:
        ```python
        config = ClientConfig(credentials=Credentials("A123", "token"))
        async with PolympicsClient(config) as client:
            team = await client.teams.get(1)
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.credentials: Credentials | None = self.config.credentials
        self._http = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=transport if transport is not None else create_transport_stack(),
        )

        self.accounts = AccountsAPI(self)
        self.teams = TeamsAPI(self)
        self.awards = AwardsAPI(self)
        self.auth = AuthAPI(self)

    async def __aenter__(self) -> "PolympicsClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._http.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    def build_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build the HTTP request for an API call without sending it.

        GET parameters go in the query string (None values are dropped);
        for every other method they are sent as a JSON body.

        Raises:
            ValueError: If ``method`` is not one the API uses.
        """
        method = HttpMethod(method)
        params = dict(params or {})
        headers: dict[str, str] = {}
        if self.credentials is not None:
            headers["Authorization"] = self.credentials.authorization_header()

        if method is HttpMethod.GET:
            query = {key: value for key, value in params.items() if value is not None}
            return self._http.build_request(method.value, path, params=query, headers=headers)
        # httpx sets Content-Type: application/json for json=
        return self._http.build_request(method.value, path, json=params, headers=headers)

    async def request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        expect_empty_body: bool = False,
    ) -> Success | EmptySuccess:
        """Send a request to an API endpoint and classify the response.

        Args:
            method: HTTP verb
            path: Endpoint path, relative to the configured base URL
            params: Query parameters (GET) or JSON body (other methods)
            expect_empty_body: Treat any 2xx as EmptySuccess

        Returns:
            Success with the decoded body, or EmptySuccess

        Raises:
            TransportError: The request could not be sent or answered
            PolympicsError: Any other classified failure, see classify_response
        """
        request = self.build_request(method, path, params)
        try:
            response = await self._http.send(request)
        except httpx.TransportError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return classify_response(response.status_code, response.content, expect_empty_body=expect_empty_body)

    async def request_body(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send a request whose response must carry a JSON body and return it.

        Raises:
            EmptyResponseError: The API answered 204 No Content
        """
        outcome = await self.request(method, path, params)
        if isinstance(outcome, EmptySuccess):
            raise EmptyResponseError()
        return outcome.body
