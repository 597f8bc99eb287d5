"""Tests for the endpoint groups against a recording mock transport."""

import json
from datetime import UTC, datetime

import httpx
import pytest

from polympics_client import ClientError, ResponseFormatError
from polympics_client.auth import Credentials
from polympics_client.models import (
    Account,
    AccountUpdate,
    AppCredentials,
    Award,
    AwardUpdate,
    ExtendedAward,
    NewAccount,
    NewAward,
    Permissions,
    Session,
    Team,
)
from polympics_client.testing import TEST_BASE_URL, make_page_payload

TEAM_WIRE = {"id": 3, "name": "Lions", "created_at": 1625097600, "member_count": 12}
ACCOUNT_WIRE = {
    "discord_id": 42,
    "display_name": "Artemis",
    "discriminator": 8799,
    "created_at": 1625184000,
    "permissions": 0,
    "avatar_url": "https://img.test/a.png",
    "team": TEAM_WIRE,
}
AWARD_WIRE = {"id": 7, "title": "Gold", "image_url": "https://img.test/g.png", "team": TEAM_WIRE}
SESSION_WIRE = {"username": "S99", "password": "session-token", "expires_at": 1627776000}

TEAM = Team.from_wire(TEAM_WIRE)
ACCOUNT = Account.from_wire(ACCOUNT_WIRE)
AWARD = Award.from_wire(AWARD_WIRE)


def body(request: httpx.Request):
    return json.loads(request.content)


class TestAccounts:
    @pytest.mark.unit
    async def test_get(self, client, transport):
        transport.queue(httpx.Response(200, json=ACCOUNT_WIRE))

        account = await client.accounts.get(42)

        assert account == ACCOUNT
        assert transport.last_request.method == "GET"
        assert transport.last_request.url == f"{TEST_BASE_URL}/account/42"

    @pytest.mark.unit
    async def test_search_sends_filters_and_page(self, client, transport):
        """Test the query, team filter and page cursor are sent as query parameters."""
        transport.queue(httpx.Response(200, json=make_page_payload([ACCOUNT_WIRE], pages=2)))
        transport.queue(httpx.Response(200, json=make_page_payload([], page=1, pages=2)))

        paginator = client.accounts.search("art", team=TEAM, per_page=10)

        assert await paginator.next_page() == [ACCOUNT]
        assert await paginator.next_page() == []

        first, second = transport.requests
        assert first.url.path == "/accounts/search"
        assert dict(first.url.params) == {"q": "art", "team": "3", "page": "0", "per_page": "10"}
        assert second.url.params["page"] == "1"

    @pytest.mark.unit
    async def test_search_without_filters(self, client, transport):
        transport.queue(httpx.Response(200, json=make_page_payload([])))

        await client.accounts.search().next_page()

        assert dict(transport.last_request.url.params) == {"page": "0"}

    @pytest.mark.unit
    async def test_create(self, client, transport):
        transport.queue(httpx.Response(200, json=ACCOUNT_WIRE))
        new_account = NewAccount(
            discord_id=42, display_name="Artemis", discriminator="8799", avatar_url="https://img.test/a.png", team=TEAM
        )

        assert await client.accounts.create(new_account) == ACCOUNT
        assert transport.last_request.method == "POST"
        assert transport.last_request.url.path == "/accounts/new"
        assert body(transport.last_request) == new_account.to_payload()

    @pytest.mark.unit
    async def test_update_removes_team(self, client, transport):
        transport.queue(httpx.Response(200, json={**ACCOUNT_WIRE, "team": None}))

        updated = await client.accounts.update(ACCOUNT, AccountUpdate(team=None))

        assert updated.team is None
        assert transport.last_request.method == "PATCH"
        assert transport.last_request.url.path == "/account/42"
        assert body(transport.last_request) == {"team": 0}

    @pytest.mark.unit
    async def test_delete(self, client, transport):
        transport.queue(httpx.Response(204))

        assert await client.accounts.delete(ACCOUNT) is None
        assert transport.last_request.method == "DELETE"
        assert transport.last_request.url.path == "/account/42"

    @pytest.mark.unit
    async def test_signups_open(self, client, transport):
        transport.queue(httpx.Response(200, json={"signups_open": True}))

        assert await client.accounts.signups_open() is True
        assert transport.last_request.url.path == "/accounts/signups"

    @pytest.mark.unit
    async def test_malformed_entity_is_response_format_error(self, client, transport):
        """Test a 200 body missing fields is reported as a protocol violation."""
        transport.queue(httpx.Response(200, json={"discord_id": 42}))

        with pytest.raises(ResponseFormatError):
            await client.accounts.get(42)

    @pytest.mark.unit
    async def test_search_page_data_not_a_list(self, client, transport):
        transport.queue(httpx.Response(200, json={**make_page_payload([]), "data": {"x": 1}}))

        with pytest.raises(ResponseFormatError):
            await client.accounts.search().next_page()

    @pytest.mark.unit
    async def test_not_found(self, client, transport):
        transport.queue(httpx.Response(404, json={"detail": "Account not found."}))

        with pytest.raises(ClientError) as exc_info:
            await client.accounts.get(1)

        assert exc_info.value.detail == "Account not found."


class TestTeams:
    @pytest.mark.unit
    async def test_get(self, client, transport):
        transport.queue(httpx.Response(200, json=TEAM_WIRE))

        assert await client.teams.get(3) == TEAM
        assert transport.last_request.url.path == "/team/3"

    @pytest.mark.unit
    async def test_search_iterates_all_pages(self, client, transport):
        transport.queue(httpx.Response(200, json=make_page_payload([TEAM_WIRE], pages=2)))
        transport.queue(httpx.Response(200, json=make_page_payload([TEAM_WIRE], page=1, pages=2)))

        teams = [team async for team in client.teams.search("li")]

        assert teams == [TEAM, TEAM]
        assert [request.url.params["page"] for request in transport.requests] == ["0", "1"]
        assert all(request.url.params["q"] == "li" for request in transport.requests)

    @pytest.mark.unit
    async def test_create_returns_team(self, client, transport):
        transport.queue(httpx.Response(200, json=TEAM_WIRE))

        team = await client.teams.create("Lions")

        assert isinstance(team, Team)
        assert team.created_at == datetime(2021, 7, 1, tzinfo=UTC)
        assert transport.last_request.url.path == "/teams/new"
        assert body(transport.last_request) == {"name": "Lions"}

    @pytest.mark.unit
    async def test_update(self, client, transport):
        transport.queue(httpx.Response(200, json={**TEAM_WIRE, "name": "Tigers"}))

        team = await client.teams.update(TEAM, "Tigers")

        assert team.name == "Tigers"
        assert transport.last_request.method == "PATCH"
        assert body(transport.last_request) == {"name": "Tigers"}

    @pytest.mark.unit
    async def test_delete(self, client, transport):
        transport.queue(httpx.Response(204))

        await client.teams.delete(TEAM)

        assert transport.last_request.method == "DELETE"
        assert transport.last_request.url.path == "/team/3"


class TestAwards:
    @pytest.mark.unit
    async def test_get_extended(self, client, transport):
        transport.queue(httpx.Response(200, json={**AWARD_WIRE, "accounts": [ACCOUNT_WIRE]}))

        award = await client.awards.get(7)

        assert isinstance(award, ExtendedAward)
        assert award.accounts == [ACCOUNT]
        assert transport.last_request.url.path == "/award/7"

    @pytest.mark.unit
    async def test_create(self, client, transport):
        transport.queue(httpx.Response(200, json=AWARD_WIRE))

        award = await client.awards.create(
            NewAward(title="Gold", image_url="https://img.test/g.png", team=TEAM, accounts=[ACCOUNT])
        )

        assert award == AWARD
        assert transport.last_request.url.path == "/awards/new"
        assert body(transport.last_request)["accounts"] == [42]

    @pytest.mark.unit
    async def test_update(self, client, transport):
        transport.queue(httpx.Response(200, json={**AWARD_WIRE, "title": "Platinum"}))

        award = await client.awards.update(AWARD, AwardUpdate(title="Platinum"))

        assert award.title == "Platinum"
        assert transport.last_request.url.path == "/award/7"
        assert body(transport.last_request) == {"title": "Platinum"}

    @pytest.mark.unit
    @pytest.mark.parametrize(("action", "method"), [("give", "PUT"), ("take", "DELETE")])
    async def test_give_and_take(self, client, transport, action, method):
        transport.queue(httpx.Response(204))

        await getattr(client.awards, action)(AWARD, ACCOUNT)

        assert transport.last_request.method == method
        assert transport.last_request.url.path == "/account/42/award/7"

    @pytest.mark.unit
    async def test_delete(self, client, transport):
        transport.queue(httpx.Response(204))

        await client.awards.delete(AWARD)

        assert transport.last_request.method == "DELETE"
        assert transport.last_request.url.path == "/award/7"


class TestAuth:
    @pytest.mark.unit
    async def test_discord_authenticate(self, client, transport):
        transport.queue(httpx.Response(200, json=SESSION_WIRE))

        session = await client.auth.discord_authenticate("oauth-token")

        assert isinstance(session, Session)
        assert session.expires_at == datetime(2021, 8, 1, tzinfo=UTC)
        assert transport.last_request.url.path == "/auth/discord"
        assert body(transport.last_request) == {"token": "oauth-token"}

    @pytest.mark.unit
    async def test_create_session(self, client, transport):
        transport.queue(httpx.Response(200, json=SESSION_WIRE))

        await client.auth.create_session(ACCOUNT)

        assert transport.last_request.url.path == "/auth/create_session"
        assert body(transport.last_request) == {"account": 42}

    @pytest.mark.unit
    async def test_reset_app_token_replaces_credentials(self, client, transport):
        """Test the new app token is used for the following request."""
        client.credentials = Credentials("A1", "old")
        transport.queue(httpx.Response(200, json={"username": "A1", "display_name": "Bot", "password": "new"}))
        transport.queue(httpx.Response(200, json={"username": "A1", "display_name": "Bot"}))

        app = await client.auth.reset_app_token()
        await client.auth.get_self_app()

        assert isinstance(app, AppCredentials)
        assert client.credentials == Credentials("A1", "new")
        reset, me = transport.requests
        assert reset.url.path == "/auth/reset_token"
        assert reset.headers["Authorization"] == Credentials("A1", "old").authorization_header()
        assert me.headers["Authorization"] == Credentials("A1", "new").authorization_header()

    @pytest.mark.unit
    async def test_reset_session_token_replaces_credentials(self, client, transport):
        client.credentials = Credentials("S99", "old")
        transport.queue(httpx.Response(200, json=SESSION_WIRE))

        await client.auth.reset_session_token()

        assert client.credentials == Credentials("S99", "session-token")

    @pytest.mark.unit
    async def test_failed_reset_keeps_credentials(self, client, transport):
        client.credentials = Credentials("A1", "old")
        transport.queue(httpx.Response(403, json={"detail": "Forbidden."}))

        with pytest.raises(ClientError):
            await client.auth.reset_app_token()

        assert client.credentials == Credentials("A1", "old")

    @pytest.mark.unit
    async def test_get_self_account(self, client, transport):
        transport.queue(httpx.Response(200, json=ACCOUNT_WIRE))

        account = await client.auth.get_self_account()

        assert account == ACCOUNT
        assert account.permissions == Permissions(0)
        assert transport.last_request.url.path == "/auth/me"
