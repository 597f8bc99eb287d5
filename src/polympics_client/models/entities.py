"""Domain objects returned by the API.

Wire keys are snake_case and timestamps are unix seconds; the field table on
each class says exactly how every attribute maps to the wire.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Generic, Self, TypeVar

from polympics_client.auth import Credentials
from polympics_client.models.codec import TIMESTAMP, FieldSpec, WireModel, as_list, list_of, optional
from polympics_client.models.permissions import Permissions

T = TypeVar("T")


@dataclass
class Team(WireModel):
    id: int
    name: str
    created_at: datetime
    member_count: int

    wire_fields = (
        FieldSpec("id", "id"),
        FieldSpec("name", "name"),
        FieldSpec("created_at", "created_at", **TIMESTAMP),
        FieldSpec("member_count", "member_count"),
    )


@dataclass
class Account(WireModel):
    """A user account, identified by the user's Discord ID."""

    discord_id: int
    display_name: str
    discriminator: int
    created_at: datetime
    permissions: Permissions
    avatar_url: str
    team: Team | None

    wire_fields = (
        FieldSpec("discord_id", "discord_id"),
        FieldSpec("display_name", "display_name"),
        FieldSpec("discriminator", "discriminator"),
        FieldSpec("created_at", "created_at", **TIMESTAMP),
        FieldSpec("permissions", "permissions", decode=Permissions, encode=int),
        FieldSpec("avatar_url", "avatar_url"),
        FieldSpec("team", "team", decode=optional(Team.from_wire), encode=optional(Team.to_wire)),
    )


@dataclass
class Award(WireModel):
    id: int
    title: str
    image_url: str
    team: Team | None

    wire_fields = (
        FieldSpec("id", "id"),
        FieldSpec("title", "title"),
        FieldSpec("image_url", "image_url"),
        FieldSpec("team", "team", decode=optional(Team.from_wire), encode=optional(Team.to_wire)),
    )


@dataclass
class ExtendedAward(Award):
    """An award together with the accounts that hold it."""

    accounts: list[Account] = field(default_factory=list)

    wire_fields = Award.wire_fields + (
        FieldSpec(
            "accounts",
            "accounts",
            decode=list_of(Account.from_wire),
            encode=list_of(Account.to_wire),
        ),
    )


@dataclass
class Session(WireModel):
    """A user authentication session; its username and password authenticate as the user."""

    username: str
    password: str = field(repr=False)
    expires_at: datetime

    wire_fields = (
        FieldSpec("username", "username"),
        FieldSpec("password", "password"),
        FieldSpec("expires_at", "expires_at", **TIMESTAMP),
    )

    @property
    def credentials(self) -> Credentials:
        return Credentials(self.username, self.password)


@dataclass
class App(WireModel):
    """Metadata on an API app."""

    username: str
    display_name: str

    wire_fields = (
        FieldSpec("username", "username"),
        FieldSpec("display_name", "display_name"),
    )


@dataclass
class AppCredentials(App):
    """Metadata and credentials for an API app."""

    password: str = field(repr=False)

    wire_fields = App.wire_fields + (FieldSpec("password", "password"),)

    @property
    def credentials(self) -> Credentials:
        return Credentials(self.username, self.password)


@dataclass
class Page(WireModel, Generic[T]):
    """One page of a paginated search."""

    page_number: int
    per_page: int
    total_pages: int
    total_results: int
    items: list[T]

    wire_fields = (
        FieldSpec("page_number", "page"),
        FieldSpec("per_page", "per_page"),
        FieldSpec("total_pages", "pages"),
        FieldSpec("total_results", "results"),
        FieldSpec("items", "data", decode=as_list, encode=list),
    )

    @classmethod
    def from_wire(cls, data: dict[str, Any], decode_item: Callable[[Any], T] | None = None) -> Self:
        page = super().from_wire(data)
        if decode_item is not None:
            page = replace(page, items=[decode_item(item) for item in page.items])
        return page

    def to_wire(self, encode_item: Callable[[T], Any] | None = None) -> dict[str, Any]:
        data = super().to_wire()
        if encode_item is not None:
            data["data"] = [encode_item(item) for item in self.items]
        return data
