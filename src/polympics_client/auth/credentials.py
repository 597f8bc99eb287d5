"""Credentials for Polympics API requests and their resolution.

The API authenticates both apps and user sessions with HTTP Basic auth:
the username is the app or session identifier and the password is its token.

Resolution order for each half of a credential pair (highest priority first):
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Password file (password only)

Example:
    ```python
    from polympics_client.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_credentials(
        username_env="POLYMPICS_USERNAME",
        password_env="POLYMPICS_PASSWORD",
        password_file_env="POLYMPICS_PASSWORD_FILE",
    )
    ```

Security Considerations:
    - Secrets are never logged in full (masked with ***)
    - Only source information is logged (env var name, file path, etc.)
    - Password files have whitespace stripped
"""

import base64
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from polympics_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """A username/password pair used to authenticate to the API."""

    username: str
    password: str = field(repr=False)

    def authorization_header(self) -> str:
        """Return the value for the ``Authorization`` header."""
        token = base64.b64encode(f"{self.username}:{self.password}".encode()).decode("ascii")
        return f"Basic {token}"


class CredentialResolver:
    """Resolve credentials from explicit values, the environment and files.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load a .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except Exception as e:
                # Continue without .env
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def _mask(self, value: str | None) -> str:
        if value is None:
            return "None"
        return "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a single value from an explicit value or the environment.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable to check when no value is given.
            required: Raise CredentialNotFoundError when nothing resolves.
            secret: Mask the value in log messages.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and no source provides a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"

        if result is not None:
            shown = self._mask(result) if secret else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file.

        Args:
            file_path: Path to the file. Supports ~ and $VAR expansion.
            env_var_name: Environment variable holding the path, used when
                file_path is None.
            required: Raise CredentialFileError when the file cannot be read.

        Returns:
            The stripped file contents, or None when unavailable and not required.

        Raises:
            CredentialFileError: If required and no path is known, or the file
                is missing, unreadable or otherwise fails to read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, secret=False)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_credentials(
        self,
        *,
        username: str | None = None,
        password: str | None = None,
        username_env: str | None = None,
        password_env: str | None = None,
        password_file: str | Path | None = None,
        password_file_env: str | None = None,
        required: bool = False,
    ) -> Credentials | None:
        """Resolve a full username/password pair.

        The password falls back to a password file when neither an explicit
        value nor the environment provides one.

        Returns:
            Credentials when both halves resolve, otherwise None.

        Raises:
            CredentialNotFoundError: If required and either half is missing.
        """
        resolved_username = self.resolve(value=username, env_var_name=username_env, secret=False)
        resolved_password = self.resolve(value=password, env_var_name=password_env)
        if resolved_password is None and (password_file is not None or password_file_env):
            resolved_password = self.resolve_from_file(
                file_path=password_file,
                env_var_name=password_file_env,
                required=required,
            )

        if resolved_username is None or resolved_password is None:
            if required:
                missing = username_env if resolved_username is None else password_env
                raise CredentialNotFoundError(
                    "Required credentials not found"
                    + (f" (checked env var: {missing})" if missing else ""),
                    env_var_name=missing,
                )
            if resolved_username is not None or resolved_password is not None:
                logger.warning("Only half of a username/password pair was resolved, ignoring it")
            return None

        return Credentials(resolved_username, resolved_password)
