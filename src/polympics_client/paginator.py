"""Sequential access to paginated search endpoints.

Example:
    ```python
    paginator = client.teams.search(search="lions", per_page=20)

    first = await paginator.next_page()   # requests page 0
    second = await paginator.next_page()  # requests page 1

    async for team in client.teams.search():
        print(team.name)
    ```
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, Generic, TypeVar

from polympics_client.models import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[dict[str, Any]], Awaitable[Page[T]]]


class Paginator(Generic[T]):
    """Fetch successive pages of results, starting at page 0.

    ``cursor`` is the zero-based number of the next page to request. It only
    advances once a page has been fetched successfully, so after N successful
    ``next_page()`` calls the next request is for page N. A failed fetch
    raises and leaves the cursor where it was.

    There is no caching and no locking: calling ``next_page()`` concurrently
    on one instance races on the cursor.

    Args:
        fetch_page: Coroutine function taking the query parameters
            (``page`` and, if set, ``per_page``) and returning a Page.
        per_page: Page size to request; the API default is used when None.
    """

    def __init__(self, fetch_page: PageFetcher[T], *, per_page: int | None = None) -> None:
        self.fetch_page = fetch_page
        self.per_page = per_page
        self.cursor = 0

    async def _fetch(self) -> Page[T]:
        params: dict[str, Any] = {"page": self.cursor}
        if self.per_page is not None:
            params["per_page"] = self.per_page

        page = await self.fetch_page(params)
        self.cursor += 1
        logger.debug(f"Fetched page {params['page']} ({len(page.items)} items of {page.total_results})")
        return page

    async def next_page(self) -> list[T]:
        """Fetch the page at the cursor and return its items.

        Past the last page the API returns an empty list rather than an error.
        """
        page = await self._fetch()
        return page.items

    async def __aiter__(self) -> AsyncIterator[T]:
        """Iterate over all remaining items.

        Stops at the first empty page, or after the last page the API reports
        in ``total_pages``.
        """
        while True:
            page = await self._fetch()
            for item in page.items:
                yield item
            if not page.items or self.cursor >= page.total_pages:
                return
