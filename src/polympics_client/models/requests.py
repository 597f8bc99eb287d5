"""Payloads for create and update requests.

These are not round-tripped: the API answers with a full entity, so each
request type only knows how to build its own JSON body.
"""

import enum
from dataclasses import dataclass, field
from typing import Any

from polympics_client.models.entities import Account, Team
from polympics_client.models.permissions import Permissions


class _Unset(enum.Enum):
    UNSET = "UNSET"


UNSET = _Unset.UNSET
"""Marks an update field as "leave unchanged" where None has its own meaning."""


@dataclass
class NewAccount:
    discord_id: int
    display_name: str
    discriminator: str
    avatar_url: str
    permissions: Permissions = Permissions(0)
    team: Team | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.discord_id,
            "name": self.display_name,
            "discriminator": self.discriminator,
            "avatar_url": self.avatar_url,
            "team": self.team.id if self.team is not None else None,
            "permissions": int(self.permissions),
        }


@dataclass
class AccountUpdate:
    """Changes to an account. Fields left as None are not sent.

    ``team`` defaults to UNSET; pass None to remove the account from its team.
    """

    display_name: str | None = None
    discriminator: str | None = None
    grant_permissions: Permissions | None = None
    revoke_permissions: Permissions | None = None
    avatar_url: str | None = None
    team: Team | None | _Unset = UNSET
    discord_token: str | None = None

    def to_payload(self) -> dict[str, Any]:
        candidates = {
            "name": self.display_name,
            "discriminator": self.discriminator,
            "grant_permissions": None if self.grant_permissions is None else int(self.grant_permissions),
            "revoke_permissions": None if self.revoke_permissions is None else int(self.revoke_permissions),
            "avatar_url": self.avatar_url,
            "discord_token": self.discord_token,
        }
        payload = {key: value for key, value in candidates.items() if value is not None}
        if self.team is not UNSET:
            # The API removes the team when given team ID 0.
            payload["team"] = self.team.id if self.team is not None else 0
        return payload


@dataclass
class NewAward:
    title: str
    image_url: str
    team: Team
    accounts: list[Account] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "image_url": self.image_url,
            "team": self.team.id,
            "accounts": [account.discord_id for account in self.accounts],
        }


@dataclass
class AwardUpdate:
    """Changes to an award. Fields left as None are not sent."""

    title: str | None = None
    image_url: str | None = None
    team: Team | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.title is not None:
            payload["title"] = self.title
        if self.image_url is not None:
            payload["image_url"] = self.image_url
        if self.team is not None:
            payload["team"] = self.team.id
        return payload
