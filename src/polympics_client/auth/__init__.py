"""Authentication components for the Polympics client.

This module provides:
- The Credentials value used to build the Basic auth header
- Multi-source credential resolution (value → env → .env → password file)

Example:
    ```python
    from polympics_client.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_credentials(
        username_env="POLYMPICS_USERNAME",
        password_env="POLYMPICS_PASSWORD",
        required=True,
    )
    ```
"""

from polympics_client.auth.credentials import CredentialResolver, Credentials
from polympics_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
]
