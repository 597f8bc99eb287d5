"""Domain models for the Polympics API and their wire mapping."""

from polympics_client.models.codec import FieldSpec, WireModel
from polympics_client.models.entities import (
    Account,
    App,
    AppCredentials,
    Award,
    ExtendedAward,
    Page,
    Session,
    Team,
)
from polympics_client.models.permissions import Permissions
from polympics_client.models.requests import (
    UNSET,
    AccountUpdate,
    AwardUpdate,
    NewAccount,
    NewAward,
)

__all__ = [
    "UNSET",
    "Account",
    "AccountUpdate",
    "App",
    "AppCredentials",
    "Award",
    "AwardUpdate",
    "ExtendedAward",
    "FieldSpec",
    "NewAccount",
    "NewAward",
    "Page",
    "Permissions",
    "Session",
    "Team",
    "WireModel",
]
