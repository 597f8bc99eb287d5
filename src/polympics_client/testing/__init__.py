"""Testing utilities for code using the Polympics client.

Example:
    ```python
    import httpx

    from polympics_client import ClientConfig, PolympicsClient
    from polympics_client.testing import RecordingTransport, make_page_payload


    async def test_lists_teams():
        transport = RecordingTransport([httpx.Response(200, json=make_page_payload([]))])
        async with PolympicsClient(ClientConfig(), transport=transport) as client:
            assert await client.teams.search().next_page() == []
        assert transport.requests[0].url.params["page"] == "0"
    ```
"""

from collections.abc import Iterable
from typing import Any

import httpx

from polympics_client.auth import Credentials

TEST_BASE_URL = "https://polympics.test"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that replays queued responses and records requests.

    Raises AssertionError when a request arrives and no response is left.
    """

    def __init__(self, responses: Iterable[httpx.Response] = ()) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def queue(self, response: httpx.Response) -> None:
        self.responses.append(response)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self.responses.pop(0)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def make_page_payload(
    data: list[Any],
    *,
    page: int = 0,
    per_page: int = 20,
    pages: int = 1,
    results: int | None = None,
) -> dict[str, Any]:
    """Build a paginated search response in wire format."""
    return {
        "page": page,
        "per_page": per_page,
        "pages": pages,
        "results": len(data) if results is None else results,
        "data": data,
    }


def mock_credentials() -> Credentials:
    return Credentials("A1234", "test-token")


__all__ = ["TEST_BASE_URL", "RecordingTransport", "make_page_payload", "mock_credentials"]
