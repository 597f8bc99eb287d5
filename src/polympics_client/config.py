"""Client configuration.

Everything the client needs is passed in explicitly through ``ClientConfig``.
``ClientConfig.from_env`` builds one from environment variables (and a
``.env`` file, via python-dotenv):

- ``POLYMPICS_API_URL``: base URL of the API
- ``POLYMPICS_USERNAME`` / ``POLYMPICS_PASSWORD``: app or session credentials
- ``POLYMPICS_PASSWORD_FILE``: file holding the password, used when
  ``POLYMPICS_PASSWORD`` is unset
- ``POLYMPICS_TIMEOUT``: request timeout in seconds
"""

import logging
from dataclasses import dataclass

from polympics_client.auth import CredentialResolver, Credentials

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT = 10.0

ENV_API_URL = "POLYMPICS_API_URL"
ENV_USERNAME = "POLYMPICS_USERNAME"
ENV_PASSWORD = "POLYMPICS_PASSWORD"
ENV_PASSWORD_FILE = "POLYMPICS_PASSWORD_FILE"
ENV_TIMEOUT = "POLYMPICS_TIMEOUT"


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a PolympicsClient.

    Attributes:
        base_url: URL that endpoint paths are appended to.
        credentials: Credentials sent with every request, if any.
        timeout: Request timeout in seconds, handed to httpx.
    """

    base_url: str = DEFAULT_BASE_URL
    credentials: Credentials | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None) -> "ClientConfig":
        """Build a configuration from the environment.

        Args:
            resolver: Resolver to use; a default one (which loads .env) is
                created when omitted.

        Raises:
            ConfigError: If POLYMPICS_TIMEOUT is not a number.
        """
        resolver = resolver or CredentialResolver()

        base_url = resolver.resolve(env_var_name=ENV_API_URL, secret=False) or DEFAULT_BASE_URL
        raw_timeout = resolver.resolve(env_var_name=ENV_TIMEOUT, secret=False)
        if raw_timeout is None:
            timeout = DEFAULT_TIMEOUT
        else:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from None

        credentials = resolver.resolve_credentials(
            username_env=ENV_USERNAME,
            password_env=ENV_PASSWORD,
            password_file_env=ENV_PASSWORD_FILE,
        )
        logger.debug(
            f"Loaded configuration: base_url={base_url}, timeout={timeout}, "
            f"authenticated={credentials is not None}"
        )
        return cls(base_url=base_url, credentials=credentials, timeout=timeout)
