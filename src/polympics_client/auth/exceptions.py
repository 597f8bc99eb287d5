"""Exceptions raised while resolving API credentials.

Example:
    ```python
    from polympics_client.auth.exceptions import CredentialNotFoundError

    if not password:
        raise CredentialNotFoundError("Password not found", env_var_name="POLYMPICS_PASSWORD")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a password file cannot be read."""

    pass
