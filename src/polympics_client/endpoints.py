"""Endpoint groups of the Polympics API.

Each group wraps one resource and converts between wire JSON and domain
objects. Groups hold no state of their own; everything goes through the
owning client's request pipeline.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from polympics_client.errors import ResponseFormatError
from polympics_client.models import (
    Account,
    AccountUpdate,
    App,
    AppCredentials,
    Award,
    AwardUpdate,
    ExtendedAward,
    NewAccount,
    NewAward,
    Page,
    Session,
    Team,
)
from polympics_client.paginator import Paginator

if TYPE_CHECKING:
    from polympics_client.client import PolympicsClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EndpointGroup:
    """Base for endpoint groups bound to a client."""

    def __init__(self, client: "PolympicsClient") -> None:
        self._client = client

    @staticmethod
    def _parse(decode: Callable[[Any], T], data: Any) -> T:
        """Decode a response body, treating a shape mismatch as a protocol violation."""
        try:
            return decode(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"Unexpected response shape: {e!r}") from e

    def _search(
        self,
        path: str,
        decode_item: Callable[[Any], T],
        filters: dict[str, Any],
        per_page: int | None,
    ) -> Paginator[T]:
        async def fetch_page(params: dict[str, Any]) -> Page[T]:
            data = await self._client.request_body("GET", path, {**filters, **params})
            return self._parse(lambda raw: Page.from_wire(raw, decode_item), data)

        return Paginator(fetch_page, per_page=per_page)


class AccountsAPI(EndpointGroup):
    """Account endpoints."""

    async def get(self, discord_id: int) -> Account:
        """Get an account by Discord ID."""
        data = await self._client.request_body("GET", f"/account/{discord_id}")
        return self._parse(Account.from_wire, data)

    def search(
        self,
        search: str | None = None,
        team: Team | None = None,
        per_page: int | None = None,
    ) -> Paginator[Account]:
        """Page through accounts matching a query, optionally limited to one team."""
        filters = {"q": search or None, "team": team.id if team is not None else None}
        return self._search("/accounts/search", Account.from_wire, filters, per_page)

    async def create(self, account: NewAccount) -> Account:
        """Create an account. Requires app or user authentication."""
        data = await self._client.request_body("POST", "/accounts/new", account.to_payload())
        return self._parse(Account.from_wire, data)

    async def update(self, account: Account, changes: AccountUpdate) -> Account:
        """Edit an account."""
        data = await self._client.request_body("PATCH", f"/account/{account.discord_id}", changes.to_payload())
        return self._parse(Account.from_wire, data)

    async def delete(self, account: Account) -> None:
        """Delete an account. Requires app or user authentication."""
        await self._client.request("DELETE", f"/account/{account.discord_id}", expect_empty_body=True)

    async def signups_open(self) -> bool:
        """Check whether signups are open."""
        data = await self._client.request_body("GET", "/accounts/signups")
        return self._parse(lambda raw: raw["signups_open"], data)


class TeamsAPI(EndpointGroup):
    """Team endpoints."""

    async def get(self, team_id: int) -> Team:
        """Get a team by ID."""
        data = await self._client.request_body("GET", f"/team/{team_id}")
        return self._parse(Team.from_wire, data)

    def search(self, search: str | None = None, per_page: int | None = None) -> Paginator[Team]:
        """Page through teams matching a query."""
        return self._search("/teams/search", Team.from_wire, {"q": search or None}, per_page)

    async def create(self, name: str) -> Team:
        """Create a team. Requires app or user authentication."""
        data = await self._client.request_body("POST", "/teams/new", {"name": name})
        return self._parse(Team.from_wire, data)

    async def update(self, team: Team, name: str) -> Team:
        """Rename a team."""
        data = await self._client.request_body("PATCH", f"/team/{team.id}", {"name": name})
        return self._parse(Team.from_wire, data)

    async def delete(self, team: Team) -> None:
        """Delete a team."""
        await self._client.request("DELETE", f"/team/{team.id}", expect_empty_body=True)


class AwardsAPI(EndpointGroup):
    """Award endpoints."""

    async def get(self, award_id: int) -> ExtendedAward:
        """Get an award, with the accounts holding it."""
        data = await self._client.request_body("GET", f"/award/{award_id}")
        return self._parse(ExtendedAward.from_wire, data)

    async def create(self, award: NewAward) -> Award:
        """Create an award and give it to the listed accounts."""
        data = await self._client.request_body("POST", "/awards/new", award.to_payload())
        return self._parse(Award.from_wire, data)

    async def update(self, award: Award, changes: AwardUpdate) -> Award:
        """Edit an award."""
        data = await self._client.request_body("PATCH", f"/award/{award.id}", changes.to_payload())
        return self._parse(Award.from_wire, data)

    async def delete(self, award: Award) -> None:
        """Delete an award."""
        await self._client.request("DELETE", f"/award/{award.id}", expect_empty_body=True)

    async def give(self, award: Award, account: Account) -> None:
        """Give an existing award to an account."""
        await self._client.request("PUT", f"/account/{account.discord_id}/award/{award.id}", expect_empty_body=True)

    async def take(self, award: Award, account: Account) -> None:
        """Take an award away from an account."""
        await self._client.request(
            "DELETE", f"/account/{account.discord_id}/award/{award.id}", expect_empty_body=True
        )


class AuthAPI(EndpointGroup):
    """Authentication endpoints.

    ``reset_app_token`` and ``reset_session_token`` invalidate the
    credentials the client is using, so both replace ``client.credentials``
    with the ones returned.
    """

    async def discord_authenticate(self, token: str) -> Session:
        """Create a user session from a Discord OAuth2 token. No authentication needed."""
        data = await self._client.request_body("POST", "/auth/discord", {"token": token})
        return self._parse(Session.from_wire, data)

    async def create_session(self, account: Account) -> Session:
        """Create a session for a user. Requires app authentication."""
        data = await self._client.request_body("POST", "/auth/create_session", {"account": account.discord_id})
        return self._parse(Session.from_wire, data)

    async def reset_app_token(self) -> AppCredentials:
        """Reset the authenticated app's token."""
        data = await self._client.request_body("POST", "/auth/reset_token")
        app = self._parse(AppCredentials.from_wire, data)
        self._client.credentials = app.credentials
        logger.info(f"Reset token for app {app.username}, using new credentials")
        return app

    async def reset_session_token(self) -> Session:
        """Reset the authenticated session's token."""
        data = await self._client.request_body("POST", "/auth/reset_token")
        session = self._parse(Session.from_wire, data)
        self._client.credentials = session.credentials
        logger.info(f"Reset session token for {session.username}, using new credentials")
        return session

    async def get_self_app(self) -> App:
        """Get metadata on the authenticated app."""
        data = await self._client.request_body("GET", "/auth/me")
        return self._parse(App.from_wire, data)

    async def get_self_account(self) -> Account:
        """Get the account of the authenticated user."""
        data = await self._client.request_body("GET", "/auth/me")
        return self._parse(Account.from_wire, data)
