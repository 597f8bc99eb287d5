"""Account permission bits."""

import enum


class Permissions(enum.IntFlag):
    """Bit flags for account permissions."""

    MANAGE_PERMISSIONS = 1 << 0
    MANAGE_ACCOUNT_TEAMS = 1 << 1
    MANAGE_ACCOUNT_DETAILS = 1 << 2
    MANAGE_TEAMS = 1 << 3
    AUTHENTICATE_USERS = 1 << 4
    MANAGE_OWN_TEAM = 1 << 5
